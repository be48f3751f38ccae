import os
import logging
from datetime import date
from typing import List, Optional
from fastapi import FastAPI, Request, Form, UploadFile, File, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.datastructures import UploadFile as StarletteUploadFile

import config
from models.schemas import BatchEvaluation, SingleEvaluation
from services.evaluation import (
    NO_PDFS,
    EvaluationError,
    ResumeFile,
    drop_subfolder_uploads,
    evaluate_batch,
    evaluate_resume,
    parse_threshold,
    validate_batch,
    validate_single,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="ResuMatch")

# Static & templates
BASE_DIR = os.path.dirname(__file__)
app.mount("/static", StaticFiles(directory=os.path.join(BASE_DIR, "static")), name="static")
templates = Jinja2Templates(directory=os.path.join(BASE_DIR, "templates"))

# ---------------------- Helpers ----------------------

def page_context(active: str = "", **extra) -> dict:
    ctx = {"active": active, "year": date.today().year, "default_threshold": config.DEFAULT_THRESHOLD}
    ctx.update(extra)
    return ctx


def render(request: Request, template: str, status_code: int = 200, **ctx):
    return templates.TemplateResponse(request, template, page_context(**ctx), status_code=status_code)


async def read_uploads(files: List[UploadFile]) -> List[ResumeFile]:
    return [ResumeFile(f.filename, await f.read()) for f in files]


async def batch_form(request: Request):
    """pdfFiles, jobDescription and threshold from a batch submission."""
    form = await request.form()
    # an empty directory input posts a bare "" instead of a file
    files = [f for f in form.getlist("pdfFiles") if isinstance(f, StarletteUploadFile)]
    job_description = form.get("jobDescription", "")
    threshold = form.get("threshold", str(config.DEFAULT_THRESHOLD))
    if not isinstance(job_description, str):
        job_description = ""
    return files, job_description, threshold


async def run_batch(pdf_files: List[UploadFile], job_description: str, threshold,
                    top_level_only: bool = False) -> BatchEvaluation:
    threshold = parse_threshold(threshold)
    pdfs = validate_batch(pdf_files, job_description)
    if top_level_only:
        # the directory picker only lists the folder's own files
        pdfs = drop_subfolder_uploads(pdfs)
        if not pdfs:
            raise EvaluationError(NO_PDFS)
    resumes = await read_uploads(pdfs)
    logger.info("Batch request with %d PDF files", len(resumes))
    return await run_in_threadpool(evaluate_batch, resumes, job_description, threshold)


async def run_single(pdf_file: Optional[UploadFile], job_description: str) -> SingleEvaluation:
    validate_single(pdf_file, job_description)
    resume = ResumeFile(pdf_file.filename, await pdf_file.read())
    return await run_in_threadpool(evaluate_resume, resume, job_description)

# ---------------------- Pages ----------------------
@app.get("/", response_class=HTMLResponse)
async def landing(request: Request):
    return render(request, "landing.html")


@app.get("/single-resume", response_class=HTMLResponse)
async def single_resume_page(request: Request):
    return render(request, "single_resume.html", active="single")


@app.post("/single-resume", response_class=HTMLResponse)
async def single_resume_submit(request: Request, pdfFile: Optional[UploadFile] = File(None), jobDescription: str = Form("")):
    try:
        result = await run_single(pdfFile, jobDescription)
    except EvaluationError as e:
        return render(request, "single_resume.html", status_code=e.status_code, active="single",
                      error=e.message, job_description=jobDescription)
    return render(request, "single_resume.html", active="single", result=result, job_description=jobDescription)


@app.get("/multiple-resumes", response_class=HTMLResponse)
async def multiple_resumes_page(request: Request):
    return render(request, "multiple_resumes.html", active="multiple", threshold=config.DEFAULT_THRESHOLD)


@app.post("/multiple-resumes", response_class=HTMLResponse)
async def multiple_resumes_submit(request: Request):
    pdf_files, job_description, threshold = await batch_form(request)
    try:
        results = await run_batch(pdf_files, job_description, threshold, top_level_only=True)
    except EvaluationError as e:
        return render(request, "multiple_resumes.html", status_code=e.status_code, active="multiple",
                      error=e.message, job_description=job_description, threshold=threshold)
    return render(request, "multiple_resumes.html", active="multiple", results=results,
                  threshold=int(threshold), job_description=job_description)

# ---------------------- JSON APIs for Frontend Fetch ----------------------
@app.post("/api/evaluate", response_model=SingleEvaluation)
async def api_evaluate(pdfFile: Optional[UploadFile] = File(None), jobDescription: str = Form("")):
    try:
        return await run_single(pdfFile, jobDescription)
    except EvaluationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@app.post("/api/evaluate-multiple", response_model=BatchEvaluation)
async def api_evaluate_multiple(request: Request):
    pdf_files, job_description, threshold = await batch_form(request)
    try:
        return await run_batch(pdf_files, job_description, threshold)
    except EvaluationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

# ---------------------- Dev convenience ----------------------
@app.get("/health")
async def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host=config.HOST, port=config.PORT, reload=True)
