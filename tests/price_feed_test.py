"""
Price Feed Test Suite
~~~~~~~~~~~~~~~~~~~~~

MockV3Aggregator rounds as seen directly and through the vesting contract.
Utilizes brownie and pytest.

"""

import brownie
from brownie import Contract, ICOTokenVesting, MockV3Aggregator, accounts

from conftest import ETH_PRICE_ANSWER, FEED_DECIMALS, MAX_SUPPLY


# Constructor opens the first round
def test_initial_round(price_feed):
    round_id, answer, started_at, updated_at, answered_in_round = price_feed.latestRoundData()

    assert price_feed.decimals() == FEED_DECIMALS
    assert price_feed.version() == 0
    assert round_id == 1
    assert answer == ETH_PRICE_ANSWER
    assert updated_at == price_feed.tx.timestamp
    assert started_at == updated_at
    assert answered_in_round == round_id


# Each update opens a new round and keeps the old ones
def test_update_answer(price_feed):
    update_tx = price_feed.updateAnswer(150000000000, {"from": accounts[0]})

    assert price_feed.latestRound() == 2
    assert price_feed.latestAnswer() == 150000000000
    assert price_feed.latestRoundData()[1] == 150000000000
    assert price_feed.getRoundData(1)[1] == ETH_PRICE_ANSWER
    assert update_tx.events["AnswerUpdated"]["roundId"] == 2


# Unknown rounds have no data
def test_unknown_round(price_feed):
    with brownie.reverts("No data present"):
        price_feed.getRoundData(7)


# Rounds can be written directly
def test_update_round_data(price_feed):
    price_feed.updateRoundData(5, 140000000000, 1700000000, 1699999990, {"from": accounts[0]})

    assert price_feed.latestRoundData() == (5, 140000000000, 1699999990, 1700000000, 5)


# Feed decimals are scaled to 18 in the vesting contract
def test_feed_decimals_are_scaled(vesting_contract):
    eighteen_decimal_feed = MockV3Aggregator.deploy(18, 1800 * 10**18, {"from": accounts[0]})

    other_contract = ICOTokenVesting.deploy(
        "Other", "OTH", eighteen_decimal_feed.address, MAX_SUPPLY, {"from": accounts[0]}
    )

    assert vesting_contract.getEthPrice() == ETH_PRICE_ANSWER * 10 ** (18 - FEED_DECIMALS)
    assert other_contract.getEthPrice() == 1800 * 10**18
    assert other_contract.getConversionRate(1) == 1800


# A feed read through the aggregator interface matches the mock
def test_feed_through_interface(price_feed):
    aggregator = Contract.from_abi("AggregatorV3Interface", price_feed.address, MockV3Aggregator.abi)

    assert aggregator.latestRoundData() == price_feed.latestRoundData()
    assert aggregator.description() == "v0.8/tests/MockV3Aggregator.sol"
