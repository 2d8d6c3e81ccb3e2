# howmuch/cli/commands.py
import click

from howmuch import config as howmuch_config
from howmuch.errors import HowmuchError
from howmuch.fees.estimator import estimate_fee_on_network, format_units
from howmuch.fees.resources import build_report, default_weights, get_resources_used
from howmuch.utils.currencies import format_dollar_cost
from howmuch.utils.logger import get_logger, set_level

logger = get_logger(__name__)

BLOCK_NUMBER = click.IntRange(min=0)


def _fail(ctx, error):
    logger.debug(f"command failed: {error!r}")
    click.secho(f"Error: {error}", fg="red", err=True)
    ctx.exit(1)


@click.group()
@click.option('-v', '--verbose', is_flag=True, help="Log every gateway query and intermediate value to stderr.")
@click.version_option(package_name="howmuch")
def cli(verbose):
    """How much? Helpers for StarkNet fees related tasks."""
    if verbose:
        set_level("DEBUG")


@cli.group()
def fees():
    """Fees related subcommands."""


@fees.command('estimate-on-network')
@click.option('-t', '--tx-hash', required=True, metavar="TX_HASH",
              help="The transaction hash on the source network.")
@click.option('--source-network-gateway-url', default=howmuch_config.DEFAULT_SOURCE_NETWORK_GATEWAY_URL,
              show_default=True, help="The source network gateway URL (goerli 2 testnet by default).")
@click.option('--destination-network-gateway-url', default=howmuch_config.DEFAULT_DESTINATION_NETWORK_GATEWAY_URL,
              show_default=True, help="The destination network gateway URL (mainnet by default).")
@click.option('--source-block-number', type=BLOCK_NUMBER, default=None,
              help="The source block number. Latest block if not provided.")
@click.option('--destination-block-number', type=BLOCK_NUMBER, default=None,
              help="The destination block number. Latest block if not provided.")
@click.option('--usd', is_flag=True, help="Also display the estimate in USD.")
@click.pass_context
def estimate_on_network(ctx, tx_hash, source_network_gateway_url, destination_network_gateway_url,
                        source_block_number, destination_block_number, usd):
    """Estimate the fee of a transaction on another network."""
    try:
        destination_fee = estimate_fee_on_network(
            tx_hash,
            source_network_gateway_url,
            destination_network_gateway_url,
            source_block_number,
            destination_block_number,
        )
    except HowmuchError as e:
        _fail(ctx, e)

    click.echo(format_units(destination_fee, howmuch_config.ETHER_DECIMALS))
    if usd:
        click.echo(format_dollar_cost(destination_fee))


@fees.command()
@click.option('-t', '--tx-hash', default=None, metavar="TX_HASH",
              help="The transaction hash. Requires --gateway-url.")
@click.option('--gateway-url', default=None, help="The network gateway URL to fetch the receipt from.")
@click.option('--transaction-file', default=None, type=click.Path(dir_okay=False),
              help="A transaction receipt JSON file. Takes precedence over --tx-hash.")
@click.option('--steps-weight', type=float, default=howmuch_config.DEFAULT_WEIGHTS["steps"], show_default=True)
@click.option('--pedersen-weight', type=float, default=howmuch_config.DEFAULT_WEIGHTS["pedersen"], show_default=True)
@click.option('--range-check-weight', type=float, default=howmuch_config.DEFAULT_WEIGHTS["range_check"], show_default=True)
@click.option('--ecdsa-weight', type=float, default=howmuch_config.DEFAULT_WEIGHTS["ecdsa"], show_default=True)
@click.option('--bitwise-weight', type=float, default=howmuch_config.DEFAULT_WEIGHTS["bitwise"], show_default=True)
@click.option('--ec-op-weight', type=float, default=howmuch_config.DEFAULT_WEIGHTS["ec_op"], show_default=True)
@click.option('--steps', default=None, help="Override the number of steps used.")
@click.option('--pedersen', default=None, help="Override the number of pedersen builtin calls.")
@click.option('--range-check', default=None, help="Override the number of range_check builtin calls.")
@click.option('--ecdsa', default=None, help="Override the number of ecdsa builtin calls.")
@click.option('--bitwise', default=None, help="Override the number of bitwise builtin calls.")
@click.option('--ec-op', default=None, help="Override the number of ec_op builtin calls.")
@click.pass_context
def summary(ctx, tx_hash, gateway_url, transaction_file,
            steps_weight, pedersen_weight, range_check_weight, ecdsa_weight, bitwise_weight, ec_op_weight,
            steps, pedersen, range_check, ecdsa, bitwise, ec_op):
    """Summarize the resources used by a transaction and the fee each one accounts for."""
    try:
        weights = default_weights(
            steps=steps_weight,
            pedersen=pedersen_weight,
            range_check=range_check_weight,
            ecdsa=ecdsa_weight,
            bitwise=bitwise_weight,
            ec_op=ec_op_weight,
        )
        resources_used = get_resources_used(tx_hash, gateway_url, transaction_file)
        resources_used.update(steps, pedersen, range_check, ecdsa, bitwise, ec_op)
    except HowmuchError as e:
        _fail(ctx, e)

    click.echo(build_report(resources_used, weights).to_table())


if __name__ == '__main__':
    cli()
