"""Create a new mod from the template tree.

The pipeline runs synchronously and in order:

1. validate the request
2. resolve (and, after confirmation, clean) the destination
3. copy the template
4. rewrite and rename the solution
5. rename the project file and update its identifiers
6. patch or create About/About.xml and reset PublishedFileId.txt

A dry run stops after step 1 and reports what steps 2-6 would do. Errors
abort the run where they happen; completed steps are not rolled back.
"""
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable, Iterable, Optional

from modprep.core.copier import copy_template, clear_directory, excluded_dir_names, running_executable
from modprep.core.errors import InstantiationError, InvalidInputError
from modprep.core.layout import PROJECT_DIR, project_name, solution_name
from modprep.core.locator import find_project_file, find_solution
from modprep.core.naming import sanitize_mod_name
from modprep.core.logger import RunLog, get_logger
from modprep.core.metadata import (
    clear_marker,
    create_metadata,
    marker_path,
    metadata_fields,
    metadata_path,
    update_metadata,
)
from modprep.core.project_file import rename_project_file, update_identifiers
from modprep.core.solution import rewrite_solution
from modprep.models.request import InstantiationRequest, RunResult, RunStatus
from modprep.services.file_browser import open_in_file_browser

logger = get_logger(__name__)

ConfirmOverwrite = Callable[[Path], bool]


def validate_request(request: InstantiationRequest) -> Path:
    """Check the request before anything is touched.

    Returns:
        The solution file of the template

    Raises:
        InvalidInputError: Bad template root, destination base or mod name
        AmbiguousOrMissingFileError: No single solution in the template
    """
    if not request.template_root.is_dir():
        raise InvalidInputError(f"Template root (source) is invalid: {request.template_root}")
    if not request.dest_base.is_dir():
        raise InvalidInputError(f"Destination base folder is invalid: {request.dest_base}")
    if not request.mod_name or request.mod_name in (".", ".."):
        raise InvalidInputError("Please enter a mod name.")
    if request.mod_name != sanitize_mod_name(request.mod_name):
        raise InvalidInputError(f"Mod name is not a valid folder name: {request.mod_name!r}")
    template = request.template_root.resolve()
    destination = request.destination.resolve()
    if destination == template or destination.is_relative_to(template):
        raise InvalidInputError(f"Destination {destination} is inside the template root.")
    return find_solution(request.template_root)


class TemplateInstantiator:
    """Runs the template instantiation pipeline for one request at a time.

    Args:
        confirm_overwrite: Asked with the destination path when it already
            exists; returning False cancels the run. There is no default,
            callers decide how the operator is asked.
        open_destination: Called with the destination when the request asks
            for it. Failures are ignored.
        excluded_paths: Files never copied. Defaults to the running
            executable.
        sink: Receives every log line as it is produced.
    """

    def __init__(
        self,
        confirm_overwrite: ConfirmOverwrite,
        open_destination: Callable[[Path], bool] = open_in_file_browser,
        excluded_paths: Optional[Iterable[Path]] = None,
        sink: Optional[Callable[[str], None]] = None,
    ):
        self.confirm_overwrite = confirm_overwrite
        self.open_destination = open_destination
        if excluded_paths is None:
            excluded_paths = [path for path in [running_executable()] if path]
        self.excluded_paths = list(excluded_paths)
        self.sink = sink

    def run(self, request: InstantiationRequest, apply: bool = False) -> RunResult:
        """Plan (``apply=False``) or perform the instantiation."""
        log = RunLog(sink=self.sink)
        result = RunResult(status=RunStatus.SUCCESS, apply=apply, log=log.lines)

        try:
            template_solution = validate_request(request)
            self._log_header(log, request)
            if not apply:
                self._log_plan(log, request, template_solution)
                return result
            self._apply(log, request, result)
        except (InstantiationError, OSError, UnicodeError, ET.ParseError) as e:
            result.status = RunStatus.FAILED
            result.error = e
            result.error_message = str(e)
            log(f"ERROR: {type(e).__name__}: {e}")
            logger.debug("Run failed", exc_info=True)
        return result

    def _log_header(self, log: RunLog, request: InstantiationRequest) -> None:
        log(f"Template root : {request.template_root}")
        log(f"Destination   : {request.destination}")
        log(f"Mod name      : {request.mod_name}")
        log(f"Pkg prefix    : {request.pkg_prefix}")
        log(f"Package id    : {request.package_id}")
        log.blank()

    def _log_plan(self, log: RunLog, request: InstantiationRequest, template_solution: Path) -> None:
        mod = request.mod_name
        template = request.template_root
        skipped = ", ".join(excluded_dir_names(request.include_git))

        if request.destination.exists():
            log(f"- Would ASK before overwriting existing destination {request.destination}")
        log(f"- Would COPY template to destination (skipping {skipped})")
        log(f"- Would RENAME solution: {template_solution.name} -> {solution_name(mod)}")
        log("- Would UPDATE .sln project entry (name/path)")

        try:
            project = find_project_file(template).name
        except InstantiationError:
            project = None
        if project is None:
            log(f"- Would FAIL: no single project file found in {PROJECT_DIR}")
        else:
            log(f"- Would RENAME {PROJECT_DIR}\\{project} -> {PROJECT_DIR}\\{project_name(mod)}")
            log("- Would EDIT RootNamespace/AssemblyName in .csproj")

        if metadata_path(template).is_file():
            log("- Would UPDATE About/About.xml <name>, <packageId>, <author>, and clear PublishedFileId.txt")
        else:
            log("- Would CREATE About/About.xml and an empty PublishedFileId.txt")
        if request.open_when_done:
            log("- Would OPEN destination when done")

    def _apply(self, log: RunLog, request: InstantiationRequest, result: RunResult) -> None:
        mod = request.mod_name
        destination = request.destination

        # 1) Copy template
        if destination.exists():
            if not self.confirm_overwrite(destination):
                log("Cancelled.")
                result.status = RunStatus.CANCELLED
                return
            leftovers = clear_directory(destination)
            if leftovers:
                logger.debug(f"Could not remove {len(leftovers)} entries from {destination}")
            log("Cleaned existing destination.")
        else:
            destination.mkdir()

        copy_template(
            request.template_root,
            destination,
            include_git=request.include_git,
            excluded_paths=self.excluded_paths,
        )
        log("Copied template.")

        # 2) Work inside the copy
        solution = find_solution(destination)
        new_solution = rewrite_solution(solution, mod)
        if new_solution.name != solution.name:
            log(f"Renamed solution -> {new_solution.name}")
        log("Updated solution project entry.")

        project, new_project = rename_project_file(destination, mod)
        if new_project.name != project.name:
            log(f"Renamed csproj -> {new_project.name}")
        if update_identifiers(new_project, mod):
            log("Updated RootNamespace/AssemblyName.")
        else:
            log("RootNamespace/AssemblyName already correct.")

        # 3) About/About.xml and PublishedFileId.txt
        about = metadata_path(destination)
        fields = metadata_fields(mod, request.package_id, request.author)
        if about.exists():
            update_metadata(about, fields)
            log("Patched About/About.xml (name/packageId/author).")
            if clear_marker(marker_path(destination)):
                log("Cleared PublishedFileId.txt.")
        else:
            create_metadata(about, fields)
            log("Created About/About.xml.")
            clear_marker(marker_path(destination), create=True)

        result.destination = destination
        result.solution_name = new_solution.name
        result.project_name = new_project.name

        log.blank()
        log("DONE.")
        log(f"- Copied to: {destination}")
        log(f"- Solution : {new_solution.name}")
        log(f"- Project  : {new_project.name}")

        if request.open_when_done:
            try:
                self.open_destination(destination)
            except Exception as e:  # opening is best effort
                logger.debug(f"Could not open {destination}: {e}")
