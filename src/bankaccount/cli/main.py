"""
Main CLI entry point for bank-account using Click.

Usage:
    bank-account [demo]
    bank-account build ACCOUNT_NUMBER [--owner TEXT] [--branch TEXT]
                       [--balance FLOAT] [--rate FLOAT]
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from bankaccount import __version__
from bankaccount.builders import BankAccountBuilder
from bankaccount.models import BankAccount

logger = logging.getLogger(__name__)

# Sample values used by the demo command
DEMO_ACCOUNT_NUMBER = 1
DEMO_OWNER = "Merge"
DEMO_BRANCH = "Springfield"
DEMO_BALANCE = 100
DEMO_RATE = 2.5


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Config:
    """Shared configuration for CLI commands."""

    def __init__(self) -> None:
        self.verbose = False
        self.debug = False


pass_config = click.make_pass_decorator(Config, ensure=True)


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.version_option(version=__version__, prog_name="bank-account")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Build bank accounts with a fluent builder.

    Runs the demo when no command is given.
    """
    ctx.ensure_object(Config)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    setup_logging(verbose=verbose, debug=debug)

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


@cli.command()
@pass_config
def demo(config: Config) -> None:
    """Build the sample account and print it.

    Example:
        bank-account demo
    """
    account = (
        BankAccount.builder(DEMO_ACCOUNT_NUMBER)
        .with_owner(DEMO_OWNER)
        .at_branch(DEMO_BRANCH)
        .opening_balance(DEMO_BALANCE)
        .at_rate(DEMO_RATE)
        .build()
    )
    logger.info(f"Built demo account {account.account_number}")
    click.echo(str(account))


@cli.command()
@click.argument("account_number", type=int)
@click.option("--owner", "-o", help="Account holder name")
@click.option("--branch", "-b", help="Branch name")
@click.option("--balance", type=float, help="Opening balance")
@click.option("--rate", "-r", type=float, help="Interest rate")
@pass_config
def build(
    config: Config,
    account_number: int,
    owner: Optional[str],
    branch: Optional[str],
    balance: Optional[float],
    rate: Optional[float],
) -> None:
    """Build an account from options and print it.

    Options that are not given keep the builder defaults.

    Example:
        bank-account build 42 --owner Lisa --branch Springfield --rate 1.5
    """
    builder = BankAccountBuilder(account_number)

    if owner is not None:
        builder.with_owner(owner)
    if branch is not None:
        builder.at_branch(branch)
    if balance is not None:
        builder.opening_balance(balance)
    if rate is not None:
        builder.at_rate(rate)

    logger.info(f"Building account with {builder}")

    click.echo(str(builder.build()))


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
