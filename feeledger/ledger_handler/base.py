from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class AbstractBaseLedger(ABC):
    """
    Interface of the account-balance ledger the fee layer is built on.

    The fee layer never touches balances directly: every debit and credit
    goes through these primitives. Implementations must apply each primitive
    all-or-nothing and must reject debits exceeding the available balance.
    """

    @abstractmethod
    def balance_of(self, address: str) -> int:
        """
        Current balance of an account.

        Parameters
        ----------
        address : str
            Canonical account address

        Returns
        -------
        int
            Balance in base units (0 for unknown accounts)
        """
        raise NotImplementedError("Should implement balance_of()")

    @property
    @abstractmethod
    def total_supply(self) -> int:
        raise NotImplementedError("Should implement total_supply")

    @abstractmethod
    def mint(self, to: str, amount: int) -> None:
        """
        Create `amount` new units on account `to`.

        Raises
        ------
        ArithmeticOverflowError
            If the balance or the total supply would leave the representable range
        """
        raise NotImplementedError("Should implement mint()")

    @abstractmethod
    def burn(self, account: str, amount: int) -> None:
        """
        Destroy `amount` units held by `account`.

        Raises
        ------
        InsufficientBalanceError
            If the account holds less than `amount`
        """
        raise NotImplementedError("Should implement burn()")

    @abstractmethod
    def raw_transfer(self, sender: str, recipient: str, amount: int) -> bool:
        """
        Move `amount` from `sender` to `recipient` without any fee logic.

        Returns
        -------
        bool
            True once the movement is applied

        Raises
        ------
        InsufficientBalanceError
            If the sender holds less than `amount`
        """
        raise NotImplementedError("Should implement raw_transfer()")

    @abstractmethod
    def spend_allowance(self, owner: str, spender: str, amount: int) -> None:
        """
        Consume `amount` of the allowance `owner` granted to `spender`.

        Raises
        ------
        InsufficientBalanceError
            If the remaining allowance is below `amount`
        """
        raise NotImplementedError("Should implement spend_allowance()")

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """
        Context manager grouping several primitives into one all-or-nothing unit.

        If the block raises, every balance change made inside it is undone
        before the exception propagates. Scopes may nest; only the outermost
        one restores state.
        """
        raise NotImplementedError("Should implement atomic()")


class AbstractExemptionOracle(ABC):
    """Answers whether an address carries a named attribute."""

    @abstractmethod
    def has_attribute(self, address: str, attribute: str) -> bool:
        raise NotImplementedError("Should implement has_attribute()")


class AbstractAuthorizer(ABC):
    """Gate for administrative operations."""

    @abstractmethod
    def is_authorized(self, caller: str) -> bool:
        raise NotImplementedError("Should implement is_authorized()")
