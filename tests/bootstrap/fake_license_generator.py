"""FakeLicenseGenerator: test double for LicenseGenerator."""


class FakeLicenseGenerator:
    """Returns a one-line license text built from its arguments."""

    def __init__(self):
        self.calls = []

    def generate(self, license_id, owner, year):
        self.calls.append((license_id, owner, year))
        return f"{license_id} license, copyright {year} {owner}\n"
