"""Per-component installer operations with failure recovery.

Installer failures never abort a session: a failed probe counts the component
as missing and a failed install is recorded as a failed outcome.
"""

import logging

from registry_sync.core.errors import InstallFailed, VerificationFailed
from registry_sync.core.installer.abc import Installer
from registry_sync.core.installer.parsing import classify_install_output, is_component_present
from registry_sync.core.installer.types import UpdateOutcome

logger = logging.getLogger(__name__)


def is_component_missing(installer: Installer, name: str) -> bool:
    """Probe the installer and report whether the component still needs installing."""
    try:
        output = installer.probe(name)
    except VerificationFailed as e:
        logger.warning("⚠️ Could not verify component %s: %s", name, e)
        return True
    return not is_component_present(output)


def install_component(installer: Installer, name: str, *, force: bool) -> UpdateOutcome:
    """Run the installer in overwrite mode for one component.

    The overwrite directive is passed whether or not ``force`` is set, so a
    non-forced install may still replace local edits.
    """
    if not force:
        logger.debug("Installing %s with overwrite although force was not requested", name)
    try:
        output = installer.add(name, overwrite=True)
    except InstallFailed as e:
        logger.error("Failed to install %s: %s", name, e)
        return UpdateOutcome.FAILED
    outcome = classify_install_output(output)
    logger.debug("Installer outcome for %s: %s", name, outcome.value)
    return outcome
