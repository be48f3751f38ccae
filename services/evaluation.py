import logging
import posixpath
from typing import Iterable, List, NamedTuple, Optional

import config
from models.resume_matcher import matcher
from models.schemas import BatchEvaluation, CandidateScore, SingleEvaluation
from utils.candidate_info import extract_email, extract_name
from utils.resume_parser import extract_text_from_pdf

logger = logging.getLogger(__name__)

NO_DIRECTORY = "Please select a directory containing resumes first"
NO_JOB_DESCRIPTION = "Please enter a job description"
NO_PDFS = "No PDF files found in the selected directory"
NO_RESUME = "Please select a PDF resume"
NOT_A_PDF = "Only PDF files are supported"
BAD_THRESHOLD = "Threshold must be a whole number between 0 and 100"


class EvaluationError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ResumeFile(NamedTuple):
    filename: str
    data: bytes


def is_pdf_filename(name: Optional[str]) -> bool:
    return bool(name) and name.lower().endswith('.pdf')


def select_pdf_uploads(files: Iterable) -> list:
    """Keep uploads whose file name ends in .pdf, in the order received."""
    return [f for f in files or [] if is_pdf_filename(f.filename)]


def drop_subfolder_uploads(files: Iterable) -> list:
    """Keep the top level of a "<dir>/<file>" directory upload."""
    return [f for f in files or [] if f.filename.count('/') <= 1]


def parse_threshold(value) -> int:
    if isinstance(value, bool):
        raise EvaluationError(BAD_THRESHOLD)
    try:
        threshold = int(str(value).strip())
    except (TypeError, ValueError):
        raise EvaluationError(BAD_THRESHOLD)
    if not 0 <= threshold <= 100:
        raise EvaluationError(BAD_THRESHOLD)
    return threshold


def validate_batch(files: Optional[list], job_description: str, max_files: int = None) -> list:
    """Check a batch submission and return the PDF uploads to evaluate."""
    max_files = config.MAX_FILES if max_files is None else max_files
    # an empty file input still posts one part with no file name
    received = [f for f in files or [] if getattr(f, 'filename', None)]
    if not received:
        raise EvaluationError(NO_DIRECTORY)
    if not (job_description or '').strip():
        raise EvaluationError(NO_JOB_DESCRIPTION)
    pdfs = select_pdf_uploads(received)
    if not pdfs:
        raise EvaluationError(NO_PDFS)
    if len(pdfs) > max_files:
        raise EvaluationError(f"Too many resumes: {len(pdfs)} (limit {max_files})", status_code=413)
    for f in pdfs:
        check_size(f)
    return pdfs


def validate_single(file, job_description: str):
    if not getattr(file, 'filename', None):
        raise EvaluationError(NO_RESUME)
    if not is_pdf_filename(file.filename):
        raise EvaluationError(NOT_A_PDF)
    if not (job_description or '').strip():
        raise EvaluationError(NO_JOB_DESCRIPTION)
    check_size(file)
    return file


def _upload_size(upload) -> Optional[int]:
    # UploadFile carries the spooled size; ResumeFile carries the bytes
    size = getattr(upload, 'size', None)
    if size is None and isinstance(getattr(upload, 'data', None), (bytes, bytearray)):
        size = len(upload.data)
    return size


def check_size(upload):
    """Reject an upload above MAX_FILE_MB, before or after it is read."""
    limit = int(config.MAX_FILE_MB * 1024 * 1024)
    size = _upload_size(upload)
    if size is not None and size > limit:
        name = posixpath.basename(upload.filename.replace('\\', '/'))
        raise EvaluationError(f"File too large: {name}", status_code=413)


def _read_candidate(resume: ResumeFile):
    text = extract_text_from_pdf(resume.data)
    if not text.strip():
        logger.warning("No text extracted from %s, scoring as 0", resume.filename)
    base = posixpath.basename(resume.filename.replace('\\', '/'))
    return text, extract_name(text, base), extract_email(text)


def evaluate_resume(resume: ResumeFile, job_description: str) -> SingleEvaluation:
    check_size(resume)
    text, name, email = _read_candidate(resume)
    score = matcher.score_one(job_description, text) if text else 0
    matched, missing = matcher.keyword_gaps(job_description, text)
    return SingleEvaluation(name=name, email=email, score=score,
                            matchedKeywords=matched, missingKeywords=missing)


def evaluate_batch(resumes: List[ResumeFile], job_description: str, threshold: int) -> BatchEvaluation:
    for r in resumes:
        check_size(r)
    scored = []
    for r in resumes:
        text, name, email = _read_candidate(r)
        score = matcher.score_one(job_description, text) if text else 0
        scored.append(CandidateScore(name=name, email=email, score=score))
    qualifying = sorted((c for c in scored if c.score >= threshold), key=lambda c: -c.score)
    logger.info("Evaluated %d resumes, %d at or above %d%%", len(scored), len(qualifying), threshold)
    return BatchEvaluation(total=len(scored), qualifying=qualifying)
