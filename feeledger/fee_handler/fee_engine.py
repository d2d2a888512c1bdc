from feeledger.fee_handler.fee_schedule import FeeRule
from feeledger.ledger_handler.attribute_registry import NO_FEES_ATTRIBUTE
from feeledger.ledger_handler.base import AbstractBaseLedger, AbstractExemptionOracle
from feeledger.logger import get_feeledger_logger
from feeledger.outils.address import AddressLike, normalize_address
from feeledger.outils.amounts import checked_add, checked_div, checked_mul, validate_amount


class FeeEngine:
    """
    Computes fees and collects them into the staker account.

    A fee is ``floor(value * numerator / denominator) + flat`` for the rule
    of the operation, or zero when either party involved carries the no-fee
    attribute. Collection moves the fee with the ledger's raw transfer
    primitive, so collecting never triggers another fee.
    """

    def __init__(
        self,
        ledger: AbstractBaseLedger,
        exemption_oracle: AbstractExemptionOracle,
        exemption_attribute: str = NO_FEES_ATTRIBUTE
    ):
        self.ledger = ledger
        self.exemption_oracle = exemption_oracle
        self.exemption_attribute = exemption_attribute
        self.logger = get_feeledger_logger().bind(component="FeeEngine")

    def compute_fee(self, rule: FeeRule, value: int) -> int:
        """
        Apply the fee formula, ignoring exemptions.

        Parameters
        ----------
        rule : FeeRule
            Rule of the operation being charged
        value : int
            Amount minted, burned or transferred

        Returns
        -------
        int
            Fee amount

        Raises
        ------
        ArithmeticOverflowError
            If the product or the final sum leaves the unsigned 256 bit range
        """
        value = validate_amount(value)
        proportional = checked_div(checked_mul(value, rule.numerator), rule.denominator)
        return checked_add(proportional, rule.flat)

    def is_exempt(self, party_a: AddressLike, party_b: AddressLike) -> bool:
        """True if either party carries the no-fee attribute."""
        return (
            self.exemption_oracle.has_attribute(normalize_address(party_a), self.exemption_attribute)
            or self.exemption_oracle.has_attribute(normalize_address(party_b), self.exemption_attribute)
        )

    def preview_fee(self, rule: FeeRule, value: int, party_a: AddressLike, party_b: AddressLike) -> int:
        """Fee `compute_and_collect_fee` would take for the same inputs, without moving anything."""
        if self.is_exempt(party_a, party_b):
            validate_amount(value)
            return 0
        return self.compute_fee(rule, value)

    def compute_and_collect_fee(
        self,
        payer: AddressLike,
        value: int,
        rule: FeeRule,
        counterparty: AddressLike,
        staker: AddressLike
    ) -> int:
        """
        Charge `payer` the fee for moving `value` and credit it to `staker`.

        Parameters
        ----------
        payer : AddressLike
            Account debited
        value : int
            Amount the fee is assessed on
        rule : FeeRule
            Rule of the operation
        counterparty : AddressLike
            Other party considered by the exemption check (the zero address
            for mint and burn, the destination for transfers)
        staker : AddressLike
            Account receiving the fee

        Returns
        -------
        int
            Fee actually collected (0 when exempt or when the formula yields 0)

        Raises
        ------
        InsufficientBalanceError
            If `payer` cannot cover the fee
        ArithmeticOverflowError
            If the fee computation overflows; raised before any ledger call
        """
        payer = normalize_address(payer)
        fee = self.preview_fee(rule, value, payer, counterparty)
        if fee > 0:
            self.ledger.raw_transfer(payer, normalize_address(staker), fee)
            self.logger.debug("Fee collected",
                payer=payer,
                staker=normalize_address(staker),
                value=str(value),
                fee=str(fee)
            )
        return fee
