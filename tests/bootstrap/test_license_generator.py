"""Tests for LicenseGenerator with the bundled license texts."""

import pytest

from projstrap.license_generator import LicenseGenerator
from projstrap.toolchain import LICENSES


@pytest.mark.unit
class TestLicenseGenerator:

    @pytest.mark.parametrize("license_id", LICENSES)
    def test_every_catalog_license_renders(self, license_id):
        text = LicenseGenerator().generate(license_id, "Jane Doe", 2024)

        assert text.strip()
        assert "{{" not in text

    @pytest.mark.parametrize("license_id", ["MIT", "ISC", "BSD-2-Clause", "BSD-3-Clause", "0BSD"])
    def test_names_year_and_owner(self, license_id):
        text = LicenseGenerator().generate(license_id, "Jane Doe", 2024)

        assert "2024" in text
        assert "Jane Doe" in text

    def test_unknown_license_raises(self):
        with pytest.raises(ValueError, match="Unknown license 'Apache-2.0'"):
            LicenseGenerator().generate("Apache-2.0", "Jane Doe", 2024)
