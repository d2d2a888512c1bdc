import queue
from typing import List, Optional

from feeledger.config.fee import FeeLedgerConfig, validate_fee_ledger_config
from feeledger.core.exceptions import ConfigurationError, InvalidParameterError
from feeledger.fee_handler.administrator import FeeAdministrator
from feeledger.fee_handler.fee_engine import FeeEngine
from feeledger.ledger_handler.attribute_registry import InMemoryAttributeRegistry
from feeledger.ledger_handler.authorizer import OwnerAuthorizer
from feeledger.ledger_handler.base import AbstractAuthorizer, AbstractBaseLedger, AbstractExemptionOracle
from feeledger.ledger_handler.in_memory_ledger import InMemoryLedger
from feeledger.logger import get_feeledger_logger
from feeledger.token_handler.transfer_router import TransferRouter


class FeeLedgerSystem(object):
    """
    Wires the fee layer components around one base ledger.

    Collaborators that are not passed in are replaced by the in-memory
    reference implementations; the authorizer defaults to an OwnerAuthorizer
    for `config.owner`. Administrative events land on `global_queue`.
    """

    def __init__(
        self,
        config: FeeLedgerConfig,
        ledger: Optional[AbstractBaseLedger] = None,
        exemption_oracle: Optional[AbstractExemptionOracle] = None,
        authorizer: Optional[AbstractAuthorizer] = None,
        global_queue: Optional[queue.Queue] = None
    ):
        self.logger = get_feeledger_logger().bind(component="FeeLedgerSystem")

        if not validate_fee_ledger_config(config.to_dict()):
            raise ConfigurationError("fee", config.name, "invalid fee ledger configuration")
        if config.staker is None:
            raise ConfigurationError("staker", reason="a staker address is required")
        if authorizer is None and config.owner is None:
            raise ConfigurationError("owner", reason="an owner address or an authorizer is required")

        self.config = config
        self.global_queue = global_queue if global_queue is not None else queue.Queue()
        self.ledger = ledger if ledger is not None else InMemoryLedger()
        self.exemption_oracle = exemption_oracle if exemption_oracle is not None else InMemoryAttributeRegistry()

        try:
            self.authorizer = authorizer if authorizer is not None else OwnerAuthorizer(config.owner)
            self.administrator = FeeAdministrator(
                self.authorizer,
                staker=config.staker,
                schedule=config.to_schedule(),
                redemption_address_count=config.redemption_address_count,
                events_queue=self.global_queue
            )
        except InvalidParameterError as e:
            raise ConfigurationError(e.parameter, str(e.value), e.reason) from e

        self.fee_engine = FeeEngine(self.ledger, self.exemption_oracle, config.exemption_attribute)
        self.router = TransferRouter(self.ledger, self.fee_engine, self.administrator)

        self.logger.info("Fee ledger system initialised", name=config.name)

    def drain_events(self) -> List:
        """Pop every pending administrative event, oldest first."""
        events = []
        while True:
            try:
                events.append(self.global_queue.get_nowait())
            except queue.Empty:
                return events


def build_fee_ledger(config: FeeLedgerConfig, **collaborators) -> FeeLedgerSystem:
    """Build a FeeLedgerSystem; see FeeLedgerSystem for the accepted collaborators."""
    return FeeLedgerSystem(config, **collaborators)
