"""Instantiation request and run result models."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from modprep.core.naming import author_or_default, build_package_id, sanitize_mod_name


@dataclass(frozen=True)
class InstantiationRequest:
    """Everything one run needs, captured up front."""
    template_root: Path
    dest_base: Path
    mod_name: str        # already sanitized, see create()
    pkg_prefix: str = ""
    include_git: bool = False
    open_when_done: bool = True

    @classmethod
    def create(
        cls,
        template_root,
        dest_base,
        mod_name: str,
        pkg_prefix: str = "",
        include_git: bool = False,
        open_when_done: bool = True,
    ) -> "InstantiationRequest":
        """Build a request from raw operator input."""
        return cls(
            template_root=Path(template_root).expanduser(),
            dest_base=Path(dest_base).expanduser(),
            mod_name=sanitize_mod_name(mod_name or ""),
            pkg_prefix=(pkg_prefix or "").strip(),
            include_git=include_git,
            open_when_done=open_when_done,
        )

    @property
    def destination(self) -> Path:
        return self.dest_base / self.mod_name

    @property
    def package_id(self) -> str:
        return build_package_id(self.pkg_prefix, self.mod_name)

    @property
    def author(self) -> str:
        return author_or_default(self.pkg_prefix)


class RunStatus(Enum):
    """How a run ended."""
    SUCCESS = "success"
    CANCELLED = "cancelled"   # operator declined to overwrite the destination
    FAILED = "failed"


@dataclass
class RunResult:
    """Outcome of a plan or apply run."""
    status: RunStatus
    apply: bool
    log: List[str] = field(default_factory=list)
    error: Optional[Exception] = None
    error_message: Optional[str] = None
    destination: Optional[Path] = None
    solution_name: Optional[str] = None
    project_name: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True unless the run failed. A cancelled run is not a failure."""
        return self.status is not RunStatus.FAILED

    def log_text(self) -> str:
        return "\n".join(self.log)
