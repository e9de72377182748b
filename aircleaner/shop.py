"""The dust data inventory and the research lab where upgrades are bought."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .events import PowerMax, RegenSpeed, SetAttackEnergy, SpawnAttacker, SpawnSpeed
from .upgrades import AdditiveEffect, ExpCosts, MultiplicativeEffect, Upgrade, UpgradeOffer

INVENTORY_TITLE = "Data Center"
DUST_DATA_LABEL = "Dust Data: "
SHOP_TITLE = "Research Lab"


class UpgradeItem(enum.Enum):
    """The upgrades on sale, in display order."""

    ATTACK_UPGRADE = enum.auto()
    NEW_ATTACKER = enum.auto()
    ENHANCE_POWER_REGEN = enum.auto()
    SPEED_UP_DUST_GEN = enum.auto()
    UPGRADE_POWER_MAX = enum.auto()


UPGRADES: dict[UpgradeItem, Upgrade] = {
    UpgradeItem.ATTACK_UPGRADE: Upgrade(
        "Attack Amount",
        "Max release",
        MultiplicativeEffect(5.0, 1.1),
        ExpCosts(10.0, 1.2),
        SetAttackEnergy,
    ),
    UpgradeItem.NEW_ATTACKER: Upgrade(
        "New Attacker",
        "Number",
        AdditiveEffect(1.0, 1.0),
        ExpCosts(50.0, 1.2),
        lambda _: SpawnAttacker(),
    ),
    UpgradeItem.ENHANCE_POWER_REGEN: Upgrade(
        "Charge Power",
        "Amount per sec",
        MultiplicativeEffect(5.0, 1.5),
        ExpCosts(20.0, 1.6),
        RegenSpeed,
    ),
    UpgradeItem.SPEED_UP_DUST_GEN: Upgrade(
        "Dust Generation",
        "Number per sec",
        AdditiveEffect(2.0, 1.2),
        ExpCosts(30.0, 1.3),
        SpawnSpeed,
    ),
    UpgradeItem.UPGRADE_POWER_MAX: Upgrade(
        "Power Max",
        "Maximum",
        AdditiveEffect(20.0, 1.2),
        ExpCosts(40.0, 1.3),
        PowerMax,
    ),
}


class InsufficientDataError(Exception):
    """Raised when an upgrade costs more dust data than is in the inventory."""

    def __init__(self, cost: int, balance: int) -> None:
        super().__init__(f"Not enough data to purchase: costs {cost}, have {balance}.")
        self.cost = cost
        self.balance = balance


@dataclass
class Inventory:
    """Resources the player has collected."""

    dust_data: int = 0


@dataclass
class ShopState:
    """The level reached by each upgrade."""

    levels: dict[UpgradeItem, int] = field(
        default_factory=lambda: {item: 0 for item in UpgradeItem}
    )

    def offers(self) -> dict[UpgradeItem, UpgradeOffer]:
        """The current offer for every upgrade, in display order."""
        return {item: UPGRADES[item].offer(self.levels[item]) for item in UpgradeItem}

    def purchase(self, item: UpgradeItem, inventory: Inventory) -> object:
        """Buy the next level of ``item`` and return the event it fires.

        Raises InsufficientDataError, leaving everything unchanged, if the
        inventory cannot pay for it.
        """
        offer = UPGRADES[item].offer(self.levels[item])
        if inventory.dust_data < offer.cost:
            raise InsufficientDataError(offer.cost, inventory.dust_data)
        inventory.dust_data -= offer.cost
        self.levels[item] += 1
        return offer.event