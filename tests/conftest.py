"""
Shared fixtures
~~~~~~~~~~~~~~~

Blockchain state resets after each test. A mock ETH/USD feed and the vesting
contract are deployed fresh for every test on top of the snapshot.

"""

import pytest
from brownie import ICOTokenVesting, MockV3Aggregator, accounts

TOKEN_NAME = "Vesting"
TOKEN_SYMBOL = "ICOV"
MAX_SUPPLY = 100

FEED_DECIMALS = 8
ETH_PRICE_ANSWER = 130057000000  # $1300.57 with 8 decimals
ETH_PRICE_FLOOR = 1300  # always below the feed answer

DEV_ACCOUNTS = 10


####################################################################################
##### ----- Fixtures   ----- #####
####################################################################################


# chain snapshot plus any accounts a test adds
@pytest.fixture(autouse=True)
def isolation(fn_isolation):
    dev_accounts = list(accounts)

    yield

    for account in list(accounts):
        if account not in dev_accounts:
            accounts.remove(account)


@pytest.fixture(scope="function")
def price_feed():
    return MockV3Aggregator.deploy(FEED_DECIMALS, ETH_PRICE_ANSWER, {"from": accounts[0]})


@pytest.fixture(scope="function")
def vesting_contract(price_feed, capsys):
    vesting_contract = ICOTokenVesting.deploy(
        TOKEN_NAME,
        TOKEN_SYMBOL,
        price_feed.address,
        MAX_SUPPLY,
        {"from": accounts[0]},
    )

    with capsys.disabled():
        print(f"Vesting Contract Deployed at {vesting_contract.address}")

    return vesting_contract
