"""
Shared fixtures for HSI attribute tests.
"""

import pytest

from hsi.core.attribute import HsiAttr
from hsi.core.flags import HsiAttrFlag


@pytest.fixture
def bios_guard() -> HsiAttr:
    """Attribute from the BIOS Guard check: success plus attestation, no level."""
    attr = HsiAttr("com.intel.BiosGuard")
    attr.set_flags(HsiAttrFlag.SUCCESS | HsiAttrFlag.RUNTIME_ATTESTATION)
    return attr


@pytest.fixture
def full_attr() -> HsiAttr:
    """Attribute with every field populated."""
    attr = HsiAttr("org.fwupd.hsi.Kernel.Lockdown")
    attr.set_name("Linux Kernel Lockdown")
    attr.set_summary("Kernel lockdown mode is enabled")
    attr.set_uri("https://example.com/hsi#kernel-lockdown")
    attr.set_number(1)
    attr.add_flag(HsiAttrFlag.SUCCESS)
    attr.add_flag(HsiAttrFlag.RUNTIME_UPDATES)
    attr.add_obsolete("org.fwupd.hsi.Kernel.Tainted")
    attr.add_obsolete("org.fwupd.hsi.Kernel.Lockdown.Old")
    return attr
