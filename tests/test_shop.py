import pytest

from aircleaner.events import PowerMax, RegenSpeed, SetAttackEnergy, SpawnAttacker, SpawnSpeed
from aircleaner.shop import InsufficientDataError, Inventory, ShopState, UpgradeItem


def test_initial_costs_are_the_cost_factors():
    offers = ShopState().offers()
    assert [offer.cost for offer in offers.values()] == [10, 50, 20, 30, 40]
    assert list(offers) == list(UpgradeItem)


def test_initial_names():
    offers = ShopState().offers()
    assert offers[UpgradeItem.ATTACK_UPGRADE].name == "Attack Amount"
    assert offers[UpgradeItem.UPGRADE_POWER_MAX].tips == "Maximum"


def test_attack_tip_text():
    offer = ShopState().offers()[UpgradeItem.ATTACK_UPGRADE]
    assert offer.tip() == "Max release: 5.0->5.5"


def test_purchase_pays_and_levels_up():
    shop = ShopState()
    inventory = Inventory(dust_data=100)
    offer = shop.offers()[UpgradeItem.ATTACK_UPGRADE]
    event = shop.purchase(UpgradeItem.ATTACK_UPGRADE, inventory)
    assert event == SetAttackEnergy(offer.new)
    assert inventory.dust_data == 100 - offer.cost
    assert shop.levels[UpgradeItem.ATTACK_UPGRADE] == 1
    following = shop.offers()[UpgradeItem.ATTACK_UPGRADE]
    assert following.previous == offer.new
    assert following.cost >= offer.cost


def test_purchase_without_enough_data_changes_nothing():
    shop = ShopState()
    inventory = Inventory(dust_data=49)
    with pytest.raises(InsufficientDataError) as info:
        shop.purchase(UpgradeItem.NEW_ATTACKER, inventory)
    assert info.value.cost == 50
    assert info.value.balance == 49
    assert inventory.dust_data == 49
    assert shop.levels[UpgradeItem.NEW_ATTACKER] == 0


def test_exact_balance_is_enough():
    shop = ShopState()
    inventory = Inventory(dust_data=50)
    assert shop.purchase(UpgradeItem.NEW_ATTACKER, inventory) == SpawnAttacker()
    assert inventory.dust_data == 0


@pytest.mark.parametrize(
    "item, event_type",
    [
        (UpgradeItem.ENHANCE_POWER_REGEN, RegenSpeed),
        (UpgradeItem.SPEED_UP_DUST_GEN, SpawnSpeed),
        (UpgradeItem.UPGRADE_POWER_MAX, PowerMax),
    ],
)
def test_events_carry_the_new_value(item, event_type):
    shop = ShopState()
    offer = shop.offers()[item]
    event = shop.purchase(item, Inventory(dust_data=1000))
    assert event == event_type(offer.new)
    assert offer.new > offer.previous


def test_costs_never_fall_with_level():
    shop = ShopState()
    inventory = Inventory(dust_data=10**9)
    costs = []
    for _ in range(10):
        costs.append(shop.offers()[UpgradeItem.SPEED_UP_DUST_GEN].cost)
        shop.purchase(UpgradeItem.SPEED_UP_DUST_GEN, inventory)
    assert costs == sorted(costs)
    assert inventory.dust_data == 10**9 - sum(costs)


def test_shops_do_not_share_levels():
    first, second = ShopState(), ShopState()
    first.purchase(UpgradeItem.ATTACK_UPGRADE, Inventory(dust_data=100))
    assert second.levels[UpgradeItem.ATTACK_UPGRADE] == 0
    assert first.levels[UpgradeItem.ATTACK_UPGRADE] == 1