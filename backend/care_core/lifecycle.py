from __future__ import annotations


class LifecycleError(Exception):
    pass


class StatusLifecycle:
    _TRANSITIONS = {
        "appointment": {
            "pending": {"confirmed", "cancelled"},
            "confirmed": {"completed", "cancelled"},
            "completed": set(),
            "cancelled": set(),
        },
        "slot": {
            "available": {"booked", "cancelled"},
            "booked": {"available", "cancelled"},
            "cancelled": {"available"},
        },
        "notification": {
            "sent": {"read", "acknowledged"},
            "read": {"acknowledged"},
            "acknowledged": set(),
        },
    }

    def allowed_next(self, kind: str, current: str) -> set[str]:
        machine = self._TRANSITIONS.get(kind)
        if machine is None:
            raise LifecycleError(f"Unknown lifecycle: {kind}")
        return machine.get(current, set())

    def ensure_transition(self, kind: str, current: str | None, next_state: str) -> None:
        current_state = current or "pending"
        if current_state == next_state:
            return
        if next_state not in self.allowed_next(kind, current_state):
            raise LifecycleError(f"Invalid transition: {current_state} -> {next_state}")

    def is_terminal(self, kind: str, state: str) -> bool:
        return not self.allowed_next(kind, state)
