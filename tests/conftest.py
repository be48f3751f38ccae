"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

import services.evaluation as evaluation
from server import app


def make_pdf(lines) -> bytes:
    """Build a minimal one-page PDF with each string on its own line."""
    def esc(s):
        return s.replace('\\', '\\\\').replace('(', '\\(').replace(')', '\\)')

    ops = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
    for i, line in enumerate(lines):
        ops.append(("" if i == 0 else "T* ") + f"({esc(line)}) Tj")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{num} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += f"{off:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode()
    return bytes(out)


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def stub_pdf_text(monkeypatch):
    """Treat uploaded bytes as the resume text, skipping PDF parsing."""
    monkeypatch.setattr(evaluation, "extract_text_from_pdf", lambda data: data.decode("utf-8"))


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def job_description():
    return (
        "Senior Python developer to build REST APIs with FastAPI and PostgreSQL. "
        "Experience with Docker, Kubernetes and machine learning pipelines is a plus."
    )
