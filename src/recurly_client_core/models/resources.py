"""Recurly resources.

Each field is named after its XML element. Amounts are integer cents; a
``dict[str, int]`` amount holds one value per currency code.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from recurly_client_core.models.base import RecurlyObject
from recurly_client_core.models.currency import RecurlyCurrency


@dataclass
class BillingInfo(RecurlyObject):
    xml_root: ClassVar[str] = "billing_info"
    BILLING_INFO_RESOURCE: ClassVar[str] = "/billing_info"

    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    phone: str | None = None
    vat_number: str | None = None
    ip_address: str | None = None
    card_type: str | None = None
    year: int | None = None
    month: int | None = None
    first_six: str | None = None
    last_four: str | None = None
    # Write-only
    number: str | None = None
    verification_value: str | None = None
    token_id: str | None = None


@dataclass
class Account(RecurlyObject):
    xml_root: ClassVar[str] = "account"
    ACCOUNT_RESOURCE: ClassVar[str] = "/accounts"

    account_code: str | None = None
    state: str | None = None
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company_name: str | None = None
    accept_language: str | None = None
    hosted_login_token: str | None = None
    created_at: datetime | None = None
    billing_info: BillingInfo | None = None


@dataclass
class AddOn(RecurlyObject):
    xml_root: ClassVar[str] = "add_on"
    ADDONS_RESOURCE: ClassVar[str] = "/add_ons"

    add_on_code: str | None = None
    name: str | None = None
    default_quantity: int | None = None
    display_quantity_on_hosted_page: bool | None = None
    unit_amount_in_cents: dict[str, int] | None = None
    created_at: datetime | None = None


@dataclass
class Plan(RecurlyObject):
    xml_root: ClassVar[str] = "plan"
    PLANS_RESOURCE: ClassVar[str] = "/plans"

    plan_code: str | None = None
    name: str | None = None
    description: str | None = None
    accounting_code: str | None = None
    plan_interval_length: int | None = None
    plan_interval_unit: str | None = None
    trial_interval_length: int | None = None
    trial_interval_unit: str | None = None
    total_billing_cycles: int | None = None
    unit_amount_in_cents: dict[str, int] | None = None
    setup_fee_in_cents: dict[str, int] | None = None
    created_at: datetime | None = None


@dataclass
class SubscriptionAddOn(RecurlyObject):
    xml_root: ClassVar[str] = "subscription_add_on"

    add_on_code: str | None = None
    quantity: int | None = None
    unit_amount_in_cents: int | None = None


@dataclass
class Subscription(RecurlyObject):
    xml_root: ClassVar[str] = "subscription"
    SUBSCRIPTION_RESOURCE: ClassVar[str] = "/subscriptions"

    uuid: str | None = None
    state: str | None = None
    plan_code: str | None = None
    account: Account | None = None
    unit_amount_in_cents: int | None = None
    quantity: int | None = None
    currency: RecurlyCurrency | None = None
    coupon_code: str | None = None
    timeframe: str | None = None
    activated_at: datetime | None = None
    canceled_at: datetime | None = None
    expires_at: datetime | None = None
    current_period_started_at: datetime | None = None
    current_period_ends_at: datetime | None = None
    trial_started_at: datetime | None = None
    trial_ends_at: datetime | None = None
    subscription_add_ons: list[SubscriptionAddOn] | None = None


@dataclass
class Coupon(RecurlyObject):
    xml_root: ClassVar[str] = "coupon"
    COUPON_RESOURCE: ClassVar[str] = "/coupons"

    coupon_code: str | None = None
    name: str | None = None
    state: str | None = None
    discount_type: str | None = None
    discount_percent: int | None = None
    discount_in_cents: dict[str, int] | None = None
    redeem_by_date: datetime | None = None
    single_use: bool | None = None
    applies_for_months: int | None = None
    max_redemptions: int | None = None
    applies_to_all_plans: bool | None = None
    created_at: datetime | None = None


@dataclass
class CouponRedeem(RecurlyObject):
    """Request body for redeeming a coupon on an account."""

    xml_root: ClassVar[str] = "redemption"
    COUPON_REDEEM_RESOURCE: ClassVar[str] = "/redeem"

    account_code: str | None = None
    currency: RecurlyCurrency | None = None


@dataclass
class Redemption(RecurlyObject):
    xml_root: ClassVar[str] = "redemption"
    REDEMPTION_RESOURCE: ClassVar[str] = "/redemption"

    uuid: str | None = None
    account: Account | None = None
    coupon: Coupon | None = None
    coupon_code: str | None = None
    single_use: bool | None = None
    total_discounted_in_cents: int | None = None
    state: str | None = None
    currency: RecurlyCurrency | None = None
    created_at: datetime | None = None


@dataclass
class Transaction(RecurlyObject):
    xml_root: ClassVar[str] = "transaction"
    TRANSACTIONS_RESOURCE: ClassVar[str] = "/transactions"

    uuid: str | None = None
    account: Account | None = None
    action: str | None = None
    amount_in_cents: int | None = None
    tax_in_cents: int | None = None
    currency: RecurlyCurrency | None = None
    status: str | None = None
    description: str | None = None
    payment_method: str | None = None
    reference: str | None = None
    source: str | None = None
    recurring: bool | None = None
    test: bool | None = None
    voidable: bool | None = None
    refundable: bool | None = None
    created_at: datetime | None = None


@dataclass
class Invoice(RecurlyObject):
    xml_root: ClassVar[str] = "invoice"
    INVOICES_RESOURCE: ClassVar[str] = "/invoices"

    uuid: str | None = None
    account: Account | None = None
    state: str | None = None
    invoice_number: int | None = None
    po_number: str | None = None
    vat_number: str | None = None
    subtotal_in_cents: int | None = None
    tax_in_cents: int | None = None
    total_in_cents: int | None = None
    currency: RecurlyCurrency | None = None
    created_at: datetime | None = None
    transactions: list[Transaction] | None = None


@dataclass
class Adjustment(RecurlyObject):
    xml_root: ClassVar[str] = "adjustment"
    ADJUSTMENTS_RESOURCE: ClassVar[str] = "/adjustments"

    uuid: str | None = None
    account: Account | None = None
    description: str | None = None
    accounting_code: str | None = None
    origin: str | None = None
    unit_amount_in_cents: int | None = None
    quantity: int | None = None
    discount_in_cents: int | None = None
    tax_in_cents: int | None = None
    total_in_cents: int | None = None
    currency: RecurlyCurrency | None = None
    taxable: bool | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime | None = None
