"""Typed Recurly resources and list responses."""

from recurly_client_core.models.base import RecurlyObject, RecurlyObjects
from recurly_client_core.models.currency import RecurlyCurrency
from recurly_client_core.models.lists import (
    Accounts,
    AddOns,
    Adjustments,
    Coupons,
    Invoices,
    Plans,
    Redemptions,
    Subscriptions,
    Transactions,
)
from recurly_client_core.models.resources import (
    Account,
    AddOn,
    Adjustment,
    BillingInfo,
    Coupon,
    CouponRedeem,
    Invoice,
    Plan,
    Redemption,
    Subscription,
    SubscriptionAddOn,
    Transaction,
)

__all__ = [
    "Account",
    "Accounts",
    "AddOn",
    "AddOns",
    "Adjustment",
    "Adjustments",
    "BillingInfo",
    "Coupon",
    "CouponRedeem",
    "Coupons",
    "Invoice",
    "Invoices",
    "Plan",
    "Plans",
    "RecurlyCurrency",
    "RecurlyObject",
    "RecurlyObjects",
    "Redemption",
    "Redemptions",
    "Subscription",
    "SubscriptionAddOn",
    "Subscriptions",
    "Transaction",
    "Transactions",
]
