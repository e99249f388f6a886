"""
Role gate for Forsee sessions.

Separates insight consumption (viewer) from actions that alter system
behaviour (engineer). Engineer access needs an admin decision that arrives
from outside this module.

State diagram:

    UNAUTHENTICATED --authenticate--> NEEDS_ROLE
    NEEDS_ROLE --select_role(viewer)--> VIEWER
    NEEDS_ROLE --select_role(engineer)--> PENDING_APPROVAL   (emits RoleRequest)
    PENDING_APPROVAL --grant(engineer)--> ENGINEER
    PENDING_APPROVAL --continue_as_viewer--> VIEWER          (request stays open)
    VIEWER --grant(engineer), request open--> ENGINEER
    any --sign_out--> UNAUTHENTICATED

Every other call is a no-op.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Role(str, Enum):
    VIEWER = "viewer"
    ENGINEER = "engineer"


class GateState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    NEEDS_ROLE = "needs_role"
    PENDING_APPROVAL = "pending_approval"
    VIEWER = "viewer"
    ENGINEER = "engineer"


@dataclass(frozen=True)
class AccessState:
    is_authenticated: bool = False
    role: Optional[Role] = None
    pending_request: bool = False

    @property
    def state(self) -> GateState:
        if not self.is_authenticated:
            return GateState.UNAUTHENTICATED
        if self.role is Role.ENGINEER:
            return GateState.ENGINEER
        if self.role is Role.VIEWER:
            return GateState.VIEWER
        if self.pending_request:
            return GateState.PENDING_APPROVAL
        return GateState.NEEDS_ROLE


@dataclass(frozen=True)
class RoleRequest:
    user_name: str
    role: Role
    requested_at: str


RequestSink = Callable[[RoleRequest], None]
ApprovalSource = Callable[[str], Optional[Role]]


def _coerce_role(role: Role | str | None) -> Role | None:
    if role is None or isinstance(role, Role):
        return role
    try:
        return Role(str(role).strip().lower())
    except ValueError:
        return None


class AccessControlGate:
    """
    Session-scoped access state machine.

    `request_sink` receives one RoleRequest per engineer request (the admin
    review queue). `approval_source` is polled by refresh() and returns the
    role an admin has assigned to the user, if any.
    """

    def __init__(
        self,
        request_sink: RequestSink | None = None,
        approval_source: ApprovalSource | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._access = AccessState()
        self._user_name: str | None = None
        self._outstanding: RoleRequest | None = None
        # bumped on every sign-in and sign-out
        self._session = 0
        self._request_sink = request_sink
        self._approval_source = approval_source

    # ----------------------------
    # Read side
    # ----------------------------

    @property
    def access(self) -> AccessState:
        return self._access

    @property
    def state(self) -> GateState:
        return self._access.state

    @property
    def user_name(self) -> str | None:
        return self._user_name

    @property
    def outstanding_request(self) -> RoleRequest | None:
        return self._outstanding

    def can_view(self) -> bool:
        return self._access.role in (Role.VIEWER, Role.ENGINEER)

    def can_act(self) -> bool:
        return self._access.role is Role.ENGINEER

    def shows_role_selection(self) -> bool:
        return self.state is GateState.NEEDS_ROLE

    # ----------------------------
    # Transitions
    # ----------------------------

    def _set(self, new: AccessState, event: str) -> None:
        old = self._access.state
        self._access = new
        if new.state is not old:
            logger.info("Access %s: %s -> %s", event, old.value, new.state.value)

    def authenticate(self, user_name: str) -> GateState:
        with self._lock:
            if self._access.is_authenticated:
                logger.debug("authenticate ignored in state %s", self.state.value)
                return self.state
            self._user_name = str(user_name)
            self._session += 1
            self._set(AccessState(is_authenticated=True), "authenticate")
            return self.state

    def sign_out(self) -> GateState:
        with self._lock:
            self._user_name = None
            self._outstanding = None
            self._session += 1
            self._set(AccessState(), "sign_out")
            return self.state

    def select_role(self, role: Role | str) -> GateState:
        r = _coerce_role(role)
        if r is Role.ENGINEER:
            return self.request_role(Role.ENGINEER)
        if r is Role.VIEWER:
            with self._lock:
                if self.state in (GateState.NEEDS_ROLE, GateState.PENDING_APPROVAL):
                    self._set(replace(self._access, role=Role.VIEWER, pending_request=False), "select_role")
                else:
                    logger.debug("select_role(viewer) ignored in state %s", self.state.value)
                return self.state
        logger.debug("select_role ignored for unknown role %r", role)
        return self.state

    def request_role(self, role: Role | str = Role.ENGINEER) -> GateState:
        """
        Ask for engineer access. The RoleRequest reaches the sink once per
        outstanding request, after the lock is released, so the sink may call
        back into the gate (e.g. an admin approving on the spot).
        """
        r = _coerce_role(role)
        with self._lock:
            if r is not Role.ENGINEER or self.state is not GateState.NEEDS_ROLE:
                logger.debug("request_role(%s) ignored in state %s", role, self.state.value)
                return self.state

            emitted: RoleRequest | None = None
            if self._outstanding is None:
                emitted = RoleRequest(
                    user_name=self._user_name or "",
                    role=Role.ENGINEER,
                    requested_at=datetime.now(timezone.utc).isoformat(),
                )
                self._outstanding = emitted
            self._set(replace(self._access, pending_request=True), "request_role")

        if emitted is not None and self._request_sink is not None:
            try:
                self._request_sink(emitted)
            except Exception:
                self._withdraw(emitted)
                raise
        return self.state

    def _withdraw(self, request: RoleRequest) -> None:
        # undelivered request: back to role selection so a retry emits again
        with self._lock:
            if self._outstanding is not request:
                return
            self._outstanding = None
            if self.state is GateState.PENDING_APPROVAL:
                self._set(replace(self._access, pending_request=False), "withdraw")

    def continue_as_viewer(self) -> GateState:
        with self._lock:
            if self.state is not GateState.PENDING_APPROVAL:
                logger.debug("continue_as_viewer ignored in state %s", self.state.value)
                return self.state
            self._set(replace(self._access, role=Role.VIEWER, pending_request=False), "continue_as_viewer")
            return self.state

    def grant(self, role: Role | str) -> GateState:
        """
        Admin decision callback: the user has been assigned `role`.

        Engineer grants apply while a request is pending, or to a viewer
        whose earlier request is still open. A role assignment to a user
        with no role yet is always honoured.
        """
        with self._lock:
            return self._grant_locked(role, session=None)

    def _grant_locked(self, role: Role | str, session: int | None) -> GateState:
        r = _coerce_role(role)
        state = self.state
        if session is not None and session != self._session:
            logger.debug("grant(%s) dropped: session changed while polling", role)
            return state
        if r is None or state is GateState.UNAUTHENTICATED:
            logger.debug("grant(%s) ignored in state %s", role, state.value)
            return state

        if state in (GateState.NEEDS_ROLE, GateState.PENDING_APPROVAL):
            allowed = True
        elif state is GateState.VIEWER:
            allowed = r is Role.ENGINEER and self._outstanding is not None
        else:
            allowed = False

        if not allowed:
            logger.debug("grant(%s) ignored in state %s", r.value, state.value)
            return state

        if r is Role.ENGINEER:
            self._outstanding = None
        self._set(replace(self._access, role=r, pending_request=False), "grant")
        return self.state

    def refresh(self) -> GateState:
        """
        Poll the approval source once and apply any assigned role.

        The source is called without the lock held; the answer is applied only
        if the same sign-in is still active when it comes back.
        """
        with self._lock:
            user_name = self._user_name
            session = self._session
        if self._approval_source is None or user_name is None:
            return self.state
        assigned = self._approval_source(user_name)
        if assigned is None:
            return self.state
        with self._lock:
            return self._grant_locked(assigned, session=session)
