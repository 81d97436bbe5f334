"""
Transition Application Status Use Case

Responsibility:
    Orchestrates gate -> transactional updater for single and mass status
    transitions. Returns a TransitionResult only after the transaction has
    committed, so anything the caller triggers afterwards (notifications)
    never follows a failed update.

Architecture Notes:
    - Part of Application Layer (Services)
    - Called by API Layer (applications router)
    - Gate failures raise before the repository is touched
    - Repository failures propagate unchanged (already rolled back)
"""

import logging
from typing import Any, Optional

from hr_tracker.application.commands.transition_status import (
    MassTransitionCommand,
    StatusTransitionGate,
    TransitionCommand,
)
from hr_tracker.application.models import Caller
from hr_tracker.domain.applications.repositories import (
    ApplicationRepositoryProtocol,
    TransitionResult,
)

logger = logging.getLogger(__name__)


class TransitionStatusUseCase:
    """
    Use case for HR-initiated application status changes.

    Usage:
        >>> use_case = TransitionStatusUseCase(gate, repository)
        >>> result = await use_case.execute_mass(caller, payload)
        >>> result.matched_count
        3
    """

    def __init__(
        self, gate: StatusTransitionGate, repository: ApplicationRepositoryProtocol
    ) -> None:
        self.gate = gate
        self.repository = repository

    async def apply_transition(self, command: TransitionCommand) -> TransitionResult:
        """Run an already gated command against the repository."""
        if isinstance(command, MassTransitionCommand):
            return await self.repository.apply_mass_transition(
                job_id=command.job_id,
                from_status=command.from_status,
                to_status=command.to_status,
            )
        return await self.repository.apply_single_transition(
            application_id=command.application_id, status=command.status
        )

    async def execute(self, caller: Optional[Caller], payload: Any) -> TransitionResult:
        """
        Gate and apply either payload form.

        Payloads carrying "jobId" are mass transitions, anything else is a
        single transition.
        """
        command = self.gate.authorize_and_validate(caller, payload)
        logger.info(f"Caller {caller.id} requested {command.__class__.__name__}")
        return await self.apply_transition(command)

    async def execute_single(self, caller: Optional[Caller], payload: Any) -> TransitionResult:
        command = self.gate.validate_single(caller, payload)
        logger.info(
            f"Caller {caller.id} requested transition of application "
            f"{command.application_id} to {command.status.value}"
        )

        result = await self.apply_transition(command)

        logger.info(f"Application {command.application_id} status updated to {command.status.value}")
        return result

    async def execute_mass(self, caller: Optional[Caller], payload: Any) -> TransitionResult:
        command = self.gate.validate_mass(caller, payload)
        logger.info(
            f"Caller {caller.id} requested mass transition for job {command.job_id}: "
            f"{command.from_status.value} -> {command.to_status.value}"
        )

        result = await self.apply_transition(command)

        logger.info(
            f"Mass transition for job {command.job_id} committed: "
            f"{result.matched_count} applications now {command.to_status.value}"
        )
        return result
