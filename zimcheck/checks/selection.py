"""Selection of the checks to run."""

from typing import Iterable, Iterator

from .kinds import SELECTABLE_CHECKS, CheckKind


class EnabledChecks:
    """Fixed-size enabled/disabled set over CheckKind.

    One flag per kind, indexed by the kind's ordinal. Everything starts
    disabled; deciding that "nothing selected" means "run everything" is the
    caller's policy.
    """

    def __init__(self, kinds: Iterable[CheckKind] = ()):
        self._flags = [False] * len(CheckKind)
        for kind in kinds:
            self.enable(kind)

    def enable_all(self) -> None:
        for kind in SELECTABLE_CHECKS:
            self._flags[kind.ordinal] = True

    def enable(self, kind: CheckKind) -> None:
        self._flags[CheckKind(kind).ordinal] = True

    def is_enabled(self, kind: CheckKind) -> bool:
        return self._flags[CheckKind(kind).ordinal]

    def any_enabled(self, *kinds: CheckKind) -> bool:
        return any(self.is_enabled(kind) for kind in kinds)

    def __iter__(self) -> Iterator[CheckKind]:
        return (kind for kind in CheckKind if self._flags[kind.ordinal])

    def __len__(self) -> int:
        return sum(self._flags)

    def __bool__(self) -> bool:
        return any(self._flags)

    def __repr__(self) -> str:
        return f"EnabledChecks([{', '.join(kind.value for kind in self)}])"
