"""License text generation from the bundled license templates."""

from projstrap.templates.template_renderer import render_template
from projstrap.toolchain import LICENSES

LICENSE_FILE = "LICENSE.md"


class LicenseGenerator:
    """Renders the license text for a catalog license identifier."""

    def generate(self, license_id: str, owner: str, year: int) -> str:
        if license_id not in LICENSES:
            raise ValueError(
                f"Unknown license '{license_id}'. Available: {', '.join(LICENSES)}"
            )
        return render_template(
            f"licenses/{license_id}.j2", package="projstrap", owner=owner, year=year,
        )
