"""Deploy ICOTokenVesting to the active brownie network.

Development networks get a MockV3Aggregator, the others use the Chainlink
ETH/USD feed configured under ``networks`` in ``brownie-config.yaml``::

    brownie run scripts/deploy.py --network goerli-fork
"""

from datetime import datetime, timezone

import structlog
from brownie import ICOTokenVesting, network
from web3 import Web3

from icovesting.log import configure_logging
from icovesting.settings import load_settings
from scripts.helpful_scripts import get_account, get_price_feed

logger = structlog.get_logger(__name__)


def deploy_vesting(settings=None, account=None):
    settings = settings if settings is not None else load_settings()
    account = account if account is not None else get_account()

    network_name, network_settings = settings.network(network.show_active())
    price_feed = get_price_feed(network_name, network_settings, account)

    token = settings.token
    vesting_contract = ICOTokenVesting.deploy(
        token.name,
        token.symbol,
        price_feed.address,
        token.max_supply,
        {"from": account},
    )

    logger.info(
        "vesting_contract_deployed",
        network=network_name,
        address=vesting_contract.address,
        owner=account.address,
        max_supply=token.max_supply,
        unlock_date=vesting_contract.unlockDate(),
    )
    return vesting_contract


def main():
    settings = load_settings()
    configure_logging(json_output=settings.logging.json_output, level=settings.logging.level)

    vesting_contract = deploy_vesting(settings)

    eth_price = Web3.from_wei(vesting_contract.getEthPrice(), "ether")
    unlock_date = datetime.fromtimestamp(vesting_contract.unlockDate(), tz=timezone.utc)

    print(f"Vesting Contract Deployed at {vesting_contract.address}")
    print(f"Current Eth Price is ${eth_price}")
    print(f"Conversion rate for 1 ETH is ${vesting_contract.getConversionRate(1)}")
    print(f"Next unlock date is {unlock_date.isoformat()}")
