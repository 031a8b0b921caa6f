"""Flat-text implementation of TaxonomyRepository.

One category per line, subcategories joined with ``@``::

    Φρέσκα τρόφιμα (Φρούτα@Λαχανικά@Ψάρια@Κρέατα)
"""

from __future__ import annotations

import re
from pathlib import Path

from market.domain.exceptions import InvalidArgument
from market.domain.model.taxonomy import CategoryTaxonomy
from market.domain.repository.taxonomy_repository import TaxonomyRepository

_LINE = re.compile(r"^(?P<category>[^(]+?)\s*\(\s*(?P<subs>[^()]*)\)$")


class TextTaxonomyRepository(TaxonomyRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> CategoryTaxonomy:
        """Read the taxonomy; a malformed line rejects the whole file."""
        taxonomy = CategoryTaxonomy()
        text = self._file_path.read_text(encoding="utf-8")
        for number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            match = _LINE.match(line)
            if match is None:
                raise InvalidArgument(
                    f"Invalid format in categories file, line {number}: {line!r}"
                )
            taxonomy.add_category(match["category"], match["subs"].split("@"))
        return taxonomy

    def save(self, taxonomy: CategoryTaxonomy) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            "".join(
                f"{category} ({'@'.join(subs)})\n"
                for category, subs in taxonomy.categories.items()
            ),
            encoding="utf-8",
        )
