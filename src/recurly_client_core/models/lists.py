"""List responses (``<accounts type="array">`` and friends)."""

from dataclasses import dataclass
from typing import ClassVar

from recurly_client_core.models.base import RecurlyObjects
from recurly_client_core.models.resources import (
    Account,
    AddOn,
    Adjustment,
    Coupon,
    Invoice,
    Plan,
    Redemption,
    Subscription,
    Transaction,
)


@dataclass
class Accounts(RecurlyObjects[Account]):
    xml_root: ClassVar[str] = "accounts"
    item_type: ClassVar[type] = Account
    ACCOUNTS_RESOURCE: ClassVar[str] = "/accounts"


@dataclass
class AddOns(RecurlyObjects[AddOn]):
    xml_root: ClassVar[str] = "add_ons"
    item_type: ClassVar[type] = AddOn


@dataclass
class Adjustments(RecurlyObjects[Adjustment]):
    xml_root: ClassVar[str] = "adjustments"
    item_type: ClassVar[type] = Adjustment
    ADJUSTMENTS_RESOURCE: ClassVar[str] = "/adjustments"


@dataclass
class Coupons(RecurlyObjects[Coupon]):
    xml_root: ClassVar[str] = "coupons"
    item_type: ClassVar[type] = Coupon


@dataclass
class Invoices(RecurlyObjects[Invoice]):
    xml_root: ClassVar[str] = "invoices"
    item_type: ClassVar[type] = Invoice
    INVOICES_RESOURCE: ClassVar[str] = "/invoices"


@dataclass
class Plans(RecurlyObjects[Plan]):
    xml_root: ClassVar[str] = "plans"
    item_type: ClassVar[type] = Plan
    PLANS_RESOURCE: ClassVar[str] = "/plans"


@dataclass
class Redemptions(RecurlyObjects[Redemption]):
    xml_root: ClassVar[str] = "redemptions"
    item_type: ClassVar[type] = Redemption
    REDEMPTIONS_RESOURCE: ClassVar[str] = "/redemptions"


@dataclass
class Subscriptions(RecurlyObjects[Subscription]):
    xml_root: ClassVar[str] = "subscriptions"
    item_type: ClassVar[type] = Subscription
    SUBSCRIPTIONS_RESOURCE: ClassVar[str] = "/subscriptions"


@dataclass
class Transactions(RecurlyObjects[Transaction]):
    xml_root: ClassVar[str] = "transactions"
    item_type: ClassVar[type] = Transaction
    TRANSACTIONS_RESOURCE: ClassVar[str] = "/transactions"
