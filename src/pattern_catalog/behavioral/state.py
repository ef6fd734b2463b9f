"""State: the session's behaviour follows its current login state."""

from abc import ABC, abstractmethod
from typing import List, Optional


class UserState(ABC):
    name: str = ""

    @abstractmethod
    def perform_action(self) -> str:
        pass


class LoggedIn(UserState):
    name = "logged_in"

    def perform_action(self) -> str:
        return "User logged in the system"


class LoggedOut(UserState):
    name = "logged_out"

    def perform_action(self) -> str:
        return "User logged out of the system"


class SessionContext:
    """Delegates ``process_action`` to whichever state is current."""

    def __init__(self, state: Optional[UserState] = None):
        self._state = state or LoggedOut()

    @property
    def state(self) -> UserState:
        return self._state

    def set_state(self, state: UserState) -> None:
        self._state = state

    def process_action(self) -> str:
        return self._state.perform_action()


def demo() -> List[str]:
    session = SessionContext()
    session.set_state(LoggedIn())
    logged_in = session.process_action()
    session.set_state(LoggedOut())
    return [logged_in, session.process_action()]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
