"""
Categorical Codebooks.

Immutable, ordered vocabularies for the six categorical attributes of the
Bank Marketing schema. Each codebook assigns indices 0..N-1 in declaration
order; unknown strings resolve to index 0 instead of failing.

Codebooks are built once at startup (`default_codebooks`) and handed to the
encoder explicitly, so alternate vocabularies can be injected in tests.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

# =========================================================================== #
#                               VOCABULARIES                                  #
# =========================================================================== #

JOB_CATEGORIES = (
    "admin.", "unknown", "unemployed", "management", "housemaid",
    "entrepreneur", "student", "blue-collar", "self-employed",
    "retired", "technician", "services",
)
MARITAL_CATEGORIES = ("married", "divorced", "single")
EDUCATION_CATEGORIES = ("unknown", "secondary", "primary", "tertiary")
CONTACT_CATEGORIES = ("unknown", "telephone", "cellular")
MONTH_CATEGORIES = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)
POUTCOME_CATEGORIES = ("unknown", "other", "failure", "success")

# =========================================================================== #
#                               CODEBOOK                                      #
# =========================================================================== #

@dataclass(frozen=True)
class CategoryCodebook:
    """
    Ordered, read-only mapping between category strings and indices.

    Attributes:
        name: Attribute the codebook belongs to (e.g., 'job').
        categories: Known categories in index order.
    """
    name: str
    categories: tuple[str, ...]
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.categories:
            raise ValueError(f"Codebook '{self.name}' needs at least one category")
        if len(set(self.categories)) != len(self.categories):
            raise ValueError(f"Codebook '{self.name}' has duplicate categories")

        index = MappingProxyType({c: i for i, c in enumerate(self.categories)})
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_sequence(cls, name: str, categories: Sequence[str]) -> "CategoryCodebook":
        return cls(name=name, categories=tuple(categories))

    @property
    def size(self) -> int:
        return len(self.categories)

    def index_of(self, value: str) -> int:
        """Index of `value`, or 0 when the category is unknown."""
        return self._index.get(value, 0)

    def decode(self, index: int) -> str:
        """
        Recovers the category string for an index.

        Raises:
            IndexError: If the index is outside 0..N-1.
        """
        if not 0 <= index < self.size:
            raise IndexError(
                f"Index {index} out of range for codebook '{self.name}' ({self.size} categories)"
            )
        return self.categories[index]

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return self.size


@dataclass(frozen=True)
class Codebooks:
    """Bundle of the six categorical codebooks consumed by the encoder."""
    job: CategoryCodebook
    marital: CategoryCodebook
    education: CategoryCodebook
    contact: CategoryCodebook
    month: CategoryCodebook
    poutcome: CategoryCodebook

    def get(self, attribute: str) -> CategoryCodebook:
        """
        Looks up a codebook by attribute name.

        Raises:
            KeyError: If the attribute is not categorical.
        """
        codebook = getattr(self, attribute, None)
        if not isinstance(codebook, CategoryCodebook):
            raise KeyError(f"No codebook for attribute '{attribute}'")
        return codebook


def default_codebooks() -> Codebooks:
    """Builds the Bank Marketing vocabularies."""
    return Codebooks(
        job=CategoryCodebook("job", JOB_CATEGORIES),
        marital=CategoryCodebook("marital", MARITAL_CATEGORIES),
        education=CategoryCodebook("education", EDUCATION_CATEGORIES),
        contact=CategoryCodebook("contact", CONTACT_CATEGORIES),
        month=CategoryCodebook("month", MONTH_CATEGORIES),
        poutcome=CategoryCodebook("poutcome", POUTCOME_CATEGORIES),
    )
