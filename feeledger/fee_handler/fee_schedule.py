from dataclasses import dataclass, field, replace
from typing import Any, Dict

from feeledger.core.enums import FeeOperation
from feeledger.core.exceptions import InvalidParameterError
from feeledger.outils.amounts import MAX_UINT256


@dataclass(frozen=True)
class FeeRule:
    """
    A single fee rule: ``fee = floor(value * numerator / denominator) + flat``.

    Parameters
    ----------
    numerator : int
        Proportional fee numerator, strictly below the denominator
    denominator : int
        Proportional fee denominator, non-zero
    flat : int, optional
        Flat amount added on top of the proportional part (default: 0)
    """
    numerator: int
    denominator: int
    flat: int = 0

    def validate(self, name: str = "rule") -> None:
        """
        Check the rule invariants.

        Raises
        ------
        InvalidParameterError
            If any component is not an in-range int, the denominator is zero,
            or the numerator is not strictly below the denominator
        """
        for part in ("numerator", "denominator", "flat"):
            value = getattr(self, part)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameterError(f"{name}.{part}", value, "must be an integer")
            if value < 0 or value > MAX_UINT256:
                raise InvalidParameterError(f"{name}.{part}", value, "outside the unsigned 256 bit range")

        if self.denominator == 0:
            raise InvalidParameterError(f"{name}.denominator", self.denominator, "must be non-zero")
        if self.numerator >= self.denominator:
            raise InvalidParameterError(
                f"{name}.numerator", self.numerator,
                f"must be strictly less than the denominator {self.denominator}"
            )

    def to_dict(self) -> Dict[str, int]:
        return {"numerator": self.numerator, "denominator": self.denominator, "flat": self.flat}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeeRule":
        return cls(
            numerator=data["numerator"],
            denominator=data["denominator"],
            flat=data.get("flat", 0)
        )


@dataclass(frozen=True)
class FeeSchedule:
    """
    Fee rules for the three fee-bearing operations.

    The default values are the launch parameters of the token this ledger
    models: 7 basis points on transfers, no mint or burn fee.
    """
    transfer: FeeRule = field(default_factory=lambda: FeeRule(7, 10000, 0))
    mint: FeeRule = field(default_factory=lambda: FeeRule(0, 10000, 0))
    burn: FeeRule = field(default_factory=lambda: FeeRule(0, 10000, 0))

    def for_operation(self, operation: FeeOperation) -> FeeRule:
        return getattr(self, operation.value)

    def validate(self) -> None:
        """Validate every rule; nothing is committed by the caller unless all pass."""
        for operation in FeeOperation:
            rule = self.for_operation(operation)
            if not isinstance(rule, FeeRule):
                raise InvalidParameterError(operation.value, rule, "must be a FeeRule")
            rule.validate(operation.value)

    def with_rule(self, operation: FeeOperation, rule: FeeRule) -> "FeeSchedule":
        return replace(self, **{operation.value: rule})

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {operation.value: self.for_operation(operation).to_dict() for operation in FeeOperation}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeeSchedule":
        defaults = cls()
        return cls(**{
            operation.value: FeeRule.from_dict(data[operation.value])
            if operation.value in data else defaults.for_operation(operation)
            for operation in FeeOperation
        })

    @classmethod
    def from_values(
        cls,
        transfer_fee_numerator: int,
        transfer_fee_denominator: int,
        mint_fee_numerator: int,
        mint_fee_denominator: int,
        mint_fee_flat: int,
        burn_fee_numerator: int,
        burn_fee_denominator: int,
        burn_fee_flat: int,
        transfer_fee_flat: int = 0
    ) -> "FeeSchedule":
        """Build a schedule from the flat argument list used by administrative calls."""
        return cls(
            transfer=FeeRule(transfer_fee_numerator, transfer_fee_denominator, transfer_fee_flat),
            mint=FeeRule(mint_fee_numerator, mint_fee_denominator, mint_fee_flat),
            burn=FeeRule(burn_fee_numerator, burn_fee_denominator, burn_fee_flat)
        )
