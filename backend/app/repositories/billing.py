from sqlalchemy import func, select

from app.models.billing import BillingInvoice, FxRate, PaymentStatus, PaymentTransaction
from app.repositories.base import Repository, id_order


class InvoiceRepository(Repository[BillingInvoice]):
    model = BillingInvoice
    id_prefix = "INV"

    async def next_id_for_year(self, year: int) -> str:
        return f"{self.id_prefix}-{year}-{await self.count() + 1:03d}"


class PaymentRepository(Repository[PaymentTransaction]):
    model = PaymentTransaction
    id_prefix = "PAY"

    async def list_for_invoice(self, invoice_id: str) -> list[PaymentTransaction]:
        result = await self.db.execute(
            select(PaymentTransaction)
            .where(PaymentTransaction.invoice_id == invoice_id)
            .order_by(*id_order(PaymentTransaction.id))
        )
        return list(result.scalars().all())

    async def settled_usd_total(self, invoice_id: str) -> float:
        """Sum of USD-normalized amounts of every Settled payment on the invoice."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(PaymentTransaction.amount_usd), 0.0))
            .where(PaymentTransaction.invoice_id == invoice_id)
            .where(PaymentTransaction.status == PaymentStatus.SETTLED)
        )
        return float(result.scalar_one())


class FxRateRepository(Repository[FxRate]):
    model = FxRate

    async def all(self) -> list[FxRate]:
        result = await self.db.execute(select(FxRate).order_by(FxRate.currency))
        return list(result.scalars().all())

    async def rate_table(self) -> dict[str, float]:
        return {rate.currency: rate.rate_to_usd for rate in await self.all()}
