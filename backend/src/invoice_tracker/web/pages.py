"""
Placeholder pages of the Invoice Tracker shell.

Each page is static: it takes no input and renders a fixed
"Coming Soon" message until its feature is built.

Design Decisions:
- Frozen dataclasses, the registry is never mutated at runtime
- Registry order is the navigation order
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceholderPage:
    """A page that only announces itself."""
    name: str
    path: str
    endpoint: str

    def __post_init__(self) -> None:
        """Validate the route path."""
        if not self.path.startswith("/"):
            raise ValueError(f"Page path must start with '/': {self.path}")

    @property
    def message(self) -> str:
        return f"{self.name} - Coming Soon"


DASHBOARD = PlaceholderPage(name="Dashboard", path="/", endpoint="dashboard")
INVOICES = PlaceholderPage(name="Invoices", path="/invoices", endpoint="invoices")
SETTINGS = PlaceholderPage(name="Settings", path="/settings", endpoint="settings")

PAGES: tuple[PlaceholderPage, ...] = (DASHBOARD, INVOICES, SETTINGS)

_PAGES_BY_PATH = {page.path: page for page in PAGES}

if len(_PAGES_BY_PATH) != len(PAGES):
    raise RuntimeError("Duplicate page paths in registry")


def get_page(path: str) -> PlaceholderPage | None:
    """Look up a page by its exact path."""
    return _PAGES_BY_PATH.get(path)


def navigation() -> list[PlaceholderPage]:
    """Pages in the order they appear in the header nav."""
    return list(PAGES)
