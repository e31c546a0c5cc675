"""Shared fixtures for tests — synthetic documents, no network calls."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from studyrag.chunking.schemas import Chunk


# ---------------------------------------------------------------------------
# Synthetic document content
# ---------------------------------------------------------------------------


@pytest.fixture
def lecture_text() -> str:
    return textwrap.dedent("""\
        Introduction to Machine Learning

        Machine learning is a field of study that gives computers the ability
        to learn without being explicitly programmed. Supervised learning uses
        labelled examples to fit a model.

        Gradient Descent

        Gradient descent minimises a loss function by repeatedly stepping in the
        direction of the negative gradient. The learning rate controls the size
        of each step.

        Overfitting

        A model that memorises its training data performs poorly on unseen data.
        Regularisation and cross-validation help detect and prevent overfitting.
    """)


@pytest.fixture
def lecture_chunks() -> list[Chunk]:
    return [
        Chunk(
            content="Machine learning lets computers learn from data. "
                    "Learning algorithms improve with experience.",
            chunk_index=0,
        ),
        Chunk(
            content="Gradient descent minimises a loss function step by step.",
            chunk_index=1,
        ),
        Chunk(
            content="Deep learning stacks many layers. Machine vision is one "
                    "application of deep learning.",
            chunk_index=2,
        ),
        Chunk(
            content="Photosynthesis converts light into chemical energy in plants.",
            chunk_index=3,
        ),
    ]


@pytest.fixture
def sample_txt_file(tmp_path: Path, lecture_text: str) -> Path:
    p = tmp_path / "lecture.txt"
    p.write_text(lecture_text, encoding="utf-8")
    return p


@pytest.fixture
def sample_pdf_file(tmp_path: Path) -> Path:
    """Create a small two-page PDF using fpdf2."""
    from fpdf import FPDF

    pdf = FPDF()
    pdf.set_title("Biology Notes")
    pdf.set_author("Study Group")
    pdf.set_subject("Cell biology")
    pdf.set_auto_page_break(auto=True, margin=15)

    pdf.add_page()
    pdf.set_font("Helvetica", size=12)
    pdf.multi_cell(0, 10, text=(
        "Cell Structure\n\n"
        "The mitochondria is the powerhouse of the cell. It produces energy "
        "through cellular respiration."
    ))

    pdf.add_page()
    pdf.multi_cell(0, 10, text=(
        "Photosynthesis\n\n"
        "Chloroplasts capture light energy and convert it into glucose."
    ))

    p = tmp_path / "biology.pdf"
    pdf.output(str(p))
    return p
