import structlog
from brownie import Contract, MockV3Aggregator, accounts, config, network

from icovesting.exceptions import ConfigError

logger = structlog.get_logger(__name__)

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["development", "ganache-local"]
FORKED_LOCAL_ENVIRONMENTS = ["mainnet-fork", "goerli-fork"]


def get_account(index=None, id=None):
    if index is not None:
        return accounts[index]
    if id:
        return accounts.load(id)
    if network.show_active() in LOCAL_BLOCKCHAIN_ENVIRONMENTS + FORKED_LOCAL_ENVIRONMENTS:
        return accounts[0]
    return accounts.add(config["wallets"]["from_key"])


def get_price_feed(network_name, network_settings, account):
    """Return the ETH/USD feed for a network, deploying a mock on local chains."""
    if network_settings.is_live_feed:
        price_feed = Contract.from_abi(
            "AggregatorV3Interface", network_settings.eth_usd_price_feed, MockV3Aggregator.abi
        )
        logger.info("live_price_feed_selected", network=network_name, address=price_feed.address)
        return price_feed

    if network_name not in LOCAL_BLOCKCHAIN_ENVIRONMENTS:
        raise ConfigError(f"network '{network_name}' has no eth_usd_price_feed configured")

    mock = network_settings.mock_feed
    price_feed = MockV3Aggregator.deploy(mock.decimals, mock.initial_answer, {"from": account})
    logger.info("mock_price_feed_deployed", network=network_name, address=price_feed.address)
    return price_feed
