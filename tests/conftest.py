import io
from typing import Callable, List, Tuple

import docx
import pytest


@pytest.fixture
def make_docx() -> Callable[..., bytes]:
	"""Build a .docx in memory from paragraphs and an optional table.

	``merge`` is ``((row, col), (row, col), text)``: the two corner cells are
	merged into one cell holding ``text``.
	"""

	def build(
		paragraphs: List[str],
		table: List[List[str]] = None,
		merge: Tuple[Tuple[int, int], Tuple[int, int], str] = None,
	) -> bytes:
		document = docx.Document()
		for text in paragraphs:
			document.add_paragraph(text)
		if table:
			grid = document.add_table(rows=len(table), cols=len(table[0]))
			for r, row in enumerate(table):
				for c, value in enumerate(row):
					grid.cell(r, c).text = value
			if merge:
				(r1, c1), (r2, c2), text = merge
				grid.cell(r1, c1).merge(grid.cell(r2, c2)).text = text
		buf = io.BytesIO()
		document.save(buf)
		return buf.getvalue()

	return build
