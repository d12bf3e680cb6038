"""Resource methods on top of `RecurlyClient`.

Each method maps one Recurly operation to a path, an optional payload and a
result type. Every method takes an optional ``credential`` that overrides the
client's key for that call only.
"""

from recurly_client_core.client import CredentialLike, Payload, RecurlyClient, quote_segment
from recurly_client_core.models import (
    Account,
    Accounts,
    AddOn,
    AddOns,
    Adjustment,
    Adjustments,
    BillingInfo,
    Coupon,
    CouponRedeem,
    Invoice,
    Invoices,
    Plan,
    Plans,
    Redemption,
    Subscription,
    Subscriptions,
    Transaction,
    Transactions,
)

# Error messages Recurly returns when an account simply has none of these
BILLING_INFO_NOT_FOUND = "Couldn't find BillingInfo with account_code"
REDEMPTION_NOT_FOUND = "Couldn't find Redemption for Account"

FETCH_RESOURCE = "/recurly_js/result"


def _account_path(account_code: str, suffix: str = "") -> str:
    return f"{Account.ACCOUNT_RESOURCE}/{quote_segment(account_code)}{suffix}"


class RecurlyAPI:
    """Thin resource facade.

    Example:
        ```python
        async with RecurlyClient("default-key") as client:
            api = RecurlyAPI(client)
            billing_info = await api.get_billing_info("acme")  # None if the account has none
        ```
    """

    def __init__(self, client: RecurlyClient):
        self.client = client

    # Accounts

    async def create_account(self, account: Payload, credential: CredentialLike = None) -> Account | None:
        return await self.client.create(Account.ACCOUNT_RESOURCE, account, Account, credential)

    async def get_accounts(self, credential: CredentialLike = None) -> Accounts | None:
        return await self.client.get_list(Accounts.ACCOUNTS_RESOURCE, Accounts, credential)

    async def get_account(self, account_code: str, credential: CredentialLike = None) -> Account | None:
        return await self.client.get(_account_path(account_code), Account, credential)

    async def update_account(
        self, account_code: str, account: Payload, credential: CredentialLike = None
    ) -> Account | None:
        return await self.client.update(_account_path(account_code), account, Account, credential)

    async def close_account(self, account_code: str, credential: CredentialLike = None) -> None:
        await self.client.delete(_account_path(account_code), credential)

    # Subscriptions

    async def create_subscription(
        self, subscription: Payload, credential: CredentialLike = None
    ) -> Subscription | None:
        return await self.client.create(Subscription.SUBSCRIPTION_RESOURCE, subscription, Subscription, credential)

    async def get_subscription(self, uuid: str, credential: CredentialLike = None) -> Subscription | None:
        path = f"{Subscription.SUBSCRIPTION_RESOURCE}/{quote_segment(uuid)}"
        return await self.client.get(path, Subscription, credential)

    async def update_subscription(
        self, uuid: str, update: Payload, credential: CredentialLike = None
    ) -> Subscription | None:
        path = f"{Subscription.SUBSCRIPTION_RESOURCE}/{quote_segment(uuid)}"
        return await self.client.update(path, update, Subscription, credential)

    async def cancel_subscription(self, uuid: str, credential: CredentialLike = None) -> Subscription | None:
        path = f"{Subscription.SUBSCRIPTION_RESOURCE}/{quote_segment(uuid)}/cancel"
        return await self.client.execute("PUT", path, target_type=Subscription, credential=credential)

    async def reactivate_subscription(self, uuid: str, credential: CredentialLike = None) -> Subscription | None:
        path = f"{Subscription.SUBSCRIPTION_RESOURCE}/{quote_segment(uuid)}/reactivate"
        return await self.client.execute("PUT", path, target_type=Subscription, credential=credential)

    async def get_account_subscriptions(
        self, account_code: str, state: str | None = None, credential: CredentialLike = None
    ) -> Subscriptions | None:
        params = {"state": state} if state else None
        path = _account_path(account_code, Subscriptions.SUBSCRIPTIONS_RESOURCE)
        return await self.client.get_list(path, Subscriptions, credential, params=params)

    # Billing info

    async def get_billing_info(self, account_code: str, credential: CredentialLike = None) -> BillingInfo | None:
        """Billing info of an account, or None if the account has none on file."""
        path = _account_path(account_code, BillingInfo.BILLING_INFO_RESOURCE)
        return await self.client.get(path, BillingInfo, credential, absent_phrase=BILLING_INFO_NOT_FOUND)

    async def update_billing_info(
        self, account_code: str, billing_info: Payload, credential: CredentialLike = None
    ) -> BillingInfo | None:
        path = _account_path(account_code, BillingInfo.BILLING_INFO_RESOURCE)
        return await self.client.update(path, billing_info, BillingInfo, credential)

    async def clear_billing_info(self, account_code: str, credential: CredentialLike = None) -> None:
        await self.client.delete(_account_path(account_code, BillingInfo.BILLING_INFO_RESOURCE), credential)

    # Transactions

    async def get_account_transactions(
        self, account_code: str, credential: CredentialLike = None
    ) -> Transactions | None:
        path = _account_path(account_code, Transactions.TRANSACTIONS_RESOURCE)
        return await self.client.get_list(path, Transactions, credential)

    async def get_transaction(self, uuid: str, credential: CredentialLike = None) -> Transaction | None:
        path = f"{Transaction.TRANSACTIONS_RESOURCE}/{quote_segment(uuid)}"
        return await self.client.get(path, Transaction, credential)

    async def create_transaction(self, transaction: Payload, credential: CredentialLike = None) -> Transaction | None:
        return await self.client.create(Transaction.TRANSACTIONS_RESOURCE, transaction, Transaction, credential)

    async def refund_transaction(
        self, uuid: str, amount_in_cents: int | None = None, credential: CredentialLike = None
    ) -> None:
        """Refund a transaction, partially when ``amount_in_cents`` is given."""
        if amount_in_cents is not None and (isinstance(amount_in_cents, bool) or not isinstance(amount_in_cents, int)):
            raise TypeError(f"amount_in_cents must be an integer number of cents, got {amount_in_cents!r}")
        params = {"amount_in_cents": amount_in_cents} if amount_in_cents is not None else None
        path = f"{Transaction.TRANSACTIONS_RESOURCE}/{quote_segment(uuid)}"
        await self.client.delete(path, credential, params=params)

    # Coupons and redemptions

    async def get_coupon(self, coupon_code: str, credential: CredentialLike = None) -> Coupon | None:
        return await self.client.get(f"{Coupon.COUPON_RESOURCE}/{quote_segment(coupon_code)}", Coupon, credential)

    async def create_coupon(self, coupon: Payload, credential: CredentialLike = None) -> Coupon | None:
        return await self.client.create(Coupon.COUPON_RESOURCE, coupon, Coupon, credential)

    async def deactivate_coupon(self, coupon_code: str, credential: CredentialLike = None) -> None:
        await self.client.delete(f"{Coupon.COUPON_RESOURCE}/{quote_segment(coupon_code)}", credential)

    async def redeem_coupon(
        self, coupon_code: str, redeem: CouponRedeem | Payload, credential: CredentialLike = None
    ) -> Redemption | None:
        path = f"{Coupon.COUPON_RESOURCE}/{quote_segment(coupon_code)}{CouponRedeem.COUPON_REDEEM_RESOURCE}"
        return await self.client.create(path, redeem, Redemption, credential)

    async def get_account_redemption(self, account_code: str, credential: CredentialLike = None) -> Redemption | None:
        """Active coupon redemption of an account, or None if there is none."""
        path = _account_path(account_code, Redemption.REDEMPTION_RESOURCE)
        return await self.client.get(path, Redemption, credential, absent_phrase=REDEMPTION_NOT_FOUND)

    # Invoices

    async def get_account_invoices(
        self, account_code: str, state: str = "all", credential: CredentialLike = None
    ) -> Invoices | None:
        path = _account_path(account_code, Invoices.INVOICES_RESOURCE)
        return await self.client.get_list(path, Invoices, credential, params={"state": state})

    async def get_invoice(self, invoice_number: int | str, credential: CredentialLike = None) -> Invoice | None:
        path = f"{Invoice.INVOICES_RESOURCE}/{quote_segment(invoice_number)}"
        return await self.client.get(path, Invoice, credential)

    # Adjustments

    async def get_account_adjustments(
        self, account_code: str, state: str | None = None, credential: CredentialLike = None
    ) -> Adjustments | None:
        params = {"state": state} if state else None
        path = _account_path(account_code, Adjustments.ADJUSTMENTS_RESOURCE)
        return await self.client.get_list(path, Adjustments, credential, params=params)

    async def create_adjustment(
        self, account_code: str, adjustment: Payload, credential: CredentialLike = None
    ) -> Adjustment | None:
        path = _account_path(account_code, Adjustments.ADJUSTMENTS_RESOURCE)
        return await self.client.create(path, adjustment, Adjustment, credential)

    async def delete_adjustment(self, uuid: str, credential: CredentialLike = None) -> None:
        await self.client.delete(f"{Adjustment.ADJUSTMENTS_RESOURCE}/{quote_segment(uuid)}", credential)

    # Plans and add-ons

    async def get_plans(self, credential: CredentialLike = None) -> Plans | None:
        return await self.client.get_list(Plans.PLANS_RESOURCE, Plans, credential)

    async def get_plan(self, plan_code: str, credential: CredentialLike = None) -> Plan | None:
        return await self.client.get(f"{Plan.PLANS_RESOURCE}/{quote_segment(plan_code)}", Plan, credential)

    async def get_add_ons(self, plan_code: str, credential: CredentialLike = None) -> AddOns | None:
        path = f"{Plan.PLANS_RESOURCE}/{quote_segment(plan_code)}{AddOn.ADDONS_RESOURCE}"
        return await self.client.get_list(path, AddOns, credential)

    async def get_add_on(self, plan_code: str, add_on_code: str, credential: CredentialLike = None) -> AddOn | None:
        path = f"{Plan.PLANS_RESOURCE}/{quote_segment(plan_code)}{AddOn.ADDONS_RESOURCE}/{quote_segment(add_on_code)}"
        return await self.client.get(path, AddOn, credential)

    # Recurly.js hosted-page results

    async def fetch_subscription(self, token: str, credential: CredentialLike = None) -> Subscription | None:
        return await self.client.get(f"{FETCH_RESOURCE}/{quote_segment(token)}", Subscription, credential)

    async def fetch_billing_info(self, token: str, credential: CredentialLike = None) -> BillingInfo | None:
        return await self.client.get(f"{FETCH_RESOURCE}/{quote_segment(token)}", BillingInfo, credential)

    async def fetch_invoice(self, token: str, credential: CredentialLike = None) -> Invoice | None:
        return await self.client.get(f"{FETCH_RESOURCE}/{quote_segment(token)}", Invoice, credential)
