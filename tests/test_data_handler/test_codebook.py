"""
Test Suite for Categorical Codebooks.

Covers index assignment, unknown-category fallback, decoding bounds and the
immutability of the default vocabularies.
"""

# =========================================================================== #
#                         Standard Imports                                    #
# =========================================================================== #
import dataclasses

# =========================================================================== #
#                         Third-Party Imports                                 #
# =========================================================================== #
import pytest

# =========================================================================== #
#                         Internal Imports                                    #
# =========================================================================== #
from bankcast.data_handler import CategoryCodebook, default_codebooks
from bankcast.data_handler.codebook import JOB_CATEGORIES, MONTH_CATEGORIES

# =========================================================================== #
#                    CODEBOOK: INDEXING                                       #
# =========================================================================== #


@pytest.mark.unit
def test_default_codebook_sizes():
    """Each categorical attribute has the expected vocabulary size."""
    books = default_codebooks()

    assert books.job.size == 12
    assert books.marital.size == 3
    assert books.education.size == 4
    assert books.contact.size == 3
    assert books.month.size == 12
    assert books.poutcome.size == 4


@pytest.mark.unit
def test_indices_follow_declaration_order():
    """Indices are assigned 0..N-1 in declared order."""
    books = default_codebooks()

    for i, category in enumerate(JOB_CATEGORIES):
        assert books.job.index_of(category) == i
    assert books.month.index_of("jan") == 0
    assert books.month.index_of("dec") == 11
    assert books.marital.index_of("single") == 2


@pytest.mark.unit
def test_unknown_category_maps_to_zero():
    """Strings outside the vocabulary resolve to index 0."""
    books = default_codebooks()

    assert books.job.index_of("astronaut") == 0
    assert books.poutcome.index_of("") == 0
    assert "astronaut" not in books.job


@pytest.mark.unit
def test_decode_round_trip():
    """decode(index_of(s)) == s for every known category."""
    book = default_codebooks().month

    for category in MONTH_CATEGORIES:
        assert book.decode(book.index_of(category)) == category


@pytest.mark.unit
@pytest.mark.parametrize("index", [-1, 12, 100])
def test_decode_out_of_range_raises(index):
    """Out-of-range indices are rejected."""
    with pytest.raises(IndexError, match="out of range"):
        default_codebooks().job.decode(index)

# =========================================================================== #
#                    CODEBOOK: CONSTRUCTION                                   #
# =========================================================================== #


@pytest.mark.unit
def test_codebook_rejects_duplicates():
    """Duplicate categories would make indices ambiguous."""
    with pytest.raises(ValueError, match="duplicate"):
        CategoryCodebook.from_sequence("color", ["red", "red"])


@pytest.mark.unit
def test_codebook_rejects_empty():
    """An empty vocabulary cannot encode anything."""
    with pytest.raises(ValueError, match="at least one"):
        CategoryCodebook("empty", ())


@pytest.mark.unit
def test_codebooks_are_immutable():
    """Codebooks cannot be mutated after construction."""
    books = default_codebooks()

    with pytest.raises(dataclasses.FrozenInstanceError):
        books.job = books.month
    with pytest.raises(TypeError):
        books.job._index["astronaut"] = 3


@pytest.mark.unit
def test_get_unknown_attribute_raises():
    """Only the six categorical attributes have codebooks."""
    books = default_codebooks()

    assert books.get("contact") is books.contact
    with pytest.raises(KeyError):
        books.get("balance")
