"""
Command-line interface for mail-bound licensing.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from maillic.common.exceptions import ConfigurationError
from maillic.common.models import KeyType, LicenserOptions
from maillic.common.persistence import KeyRingStore
from maillic.issuer.keygen import KeyGenerator
from maillic.issuer.license_generator import LicenseGenerator
from maillic.licenser.application.licenser import Licenser
from maillic.licenser.infrastructure.directory import StaticIdentityDirectory

KEYRING_HELP = "Keyring file (default: from MAILLIC_KEYRING env or ./maillic/keys)"


@click.group()
def cli() -> None:
    """Mail-bound license tools"""


@cli.command()
@click.option("--keyring", "keyring_path", default=None, help=KEYRING_HELP)
@click.option("--bits", default=None, type=int, help="RSA modulus size in bits")
def keygen(keyring_path: str | None, bits: int | None) -> None:
    """Generate license key material"""
    try:
        generator = KeyGenerator(Path(keyring_path) if keyring_path else None, bits)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    generator.generate_keys()
    click.echo(f"Keyring generated and saved to {generator.keyring_path}")


@cli.command()
@click.argument("mail")
@click.argument("expiry_date")
@click.option(
    "--type",
    "key_type",
    type=click.Choice([key_type.value for key_type in KeyType]),
    default=KeyType.PERSONAL.value,
    show_default=True,
    help="License tier",
)
@click.option("--keyring", "keyring_path", default=None, help=KEYRING_HELP)
def encrypt(
    mail: str, expiry_date: str, key_type: str, keyring_path: str | None
) -> None:
    """Create a license key (development only)"""
    try:
        keyring = KeyRingStore.load(Path(keyring_path)) if keyring_path else None
        generator = LicenseGenerator(keyring=keyring)
        license_key = generator.generate_license(mail, expiry_date, KeyType(key_type))
    except (ConfigurationError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(license_key)


@cli.command()
@click.argument("license_key")
@click.option(
    "--accounts",
    "accounts_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="JSON file listing the mail accounts and identities",
)
@click.option("--keyring", "keyring_path", default=None, help=KEYRING_HELP)
@click.option(
    "--force-secondary",
    is_flag=True,
    help="Match secondary identities instead of account defaults",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full license info")
def validate(
    license_key: str,
    accounts_path: str,
    keyring_path: str | None,
    force_secondary: bool,  # noqa: FBT001
    as_json: bool,  # noqa: FBT001
) -> None:
    """Validate a license key against configured accounts"""
    options = LicenserOptions(
        force_secondary_identity=force_secondary,
        keyring_path=Path(keyring_path) if keyring_path else None,
    )
    try:
        directory = StaticIdentityDirectory.from_file(Path(accounts_path))
        licenser = Licenser(license_key, directory, options)
        info = asyncio.run(licenser.validate())
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(info.model_dump(mode="json", by_alias=True), indent=2))
    else:
        click.echo(f"{info.status}: {info.description}")
    if not info.is_valid:
        sys.exit(1)


if __name__ == "__main__":
    cli()
