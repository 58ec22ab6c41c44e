import os
import asyncio
from typing import Optional, Tuple
from flask import Blueprint, Flask, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException, NotFound
from dotenv import load_dotenv

# --- IMPORTS FROM OUR FILES ---
from config import CONFIG
from models import ApplicationStatus, NewApplication, NewJob, Resume
from utils import extract_resume_text

# Import services
from services.application_assistant import ApplicationAssistant
from services.completion_client import CompletionClient, openai_client_factory
from services.exceptions import CompletionFailed, InvalidInput, ParseFailed
from services.storage import JsonStore

api = Blueprint("api", __name__, url_prefix="/api")


# --- APPLICATION SETUP ---
def build_assistant(api_key: str, base_url: Optional[str] = None) -> ApplicationAssistant:
    """Wires the OpenAI client factory into the workflow services."""
    client_factory = openai_client_factory(api_key, CONFIG["request_timeout_s"], base_url)
    completion_client = CompletionClient(client_factory, CONFIG["openai_model"], CONFIG["openai_parameters"])
    return ApplicationAssistant(completion_client)


def create_app(assistant: ApplicationAssistant, store: JsonStore) -> Flask:
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = CONFIG["upload"]["max_bytes"] + 64 * 1024
    app.extensions["assistant"] = assistant
    app.extensions["store"] = store
    app.register_blueprint(api)

    @app.errorhandler(InvalidInput)
    def handle_invalid_input(e):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"message": e.description}), e.code

    return app


def _assistant() -> ApplicationAssistant:
    return current_app.extensions["assistant"]


def _store() -> JsonStore:
    return current_app.extensions["store"]


def _payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict()
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def _optional_string(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidInput(f"{key} must be a string")
    return value


def _validation_errors(e: ValidationError) -> list:
    return [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]


def _resolve_resume(payload: dict) -> Tuple[str, Optional[Resume]]:
    """Resume text comes either from a stored resume (resumeId) or inline (resumeText)."""
    resume_id = payload.get("resumeId")
    if resume_id is None:
        return payload.get("resumeText") or "", None
    try:
        resume = _store().get_resume(int(resume_id))
    except (TypeError, ValueError) as e:
        raise InvalidInput("resumeId must be an integer") from e
    if not resume:
        raise NotFound("Resume not found")
    return resume.original_content, resume


def _job_text(payload: dict) -> str:
    return payload.get("jobDescription") or payload.get("jobText") or ""


# --- RESUME ROUTES ---
@api.route('/resumes', methods=['POST'])
def upload_resume():
    """Stores an uploaded or pasted resume, then records best-effort AI suggestions for it."""
    payload = _payload()
    upload = request.files.get('resume')
    content = _optional_string(payload, 'content')

    if upload and upload.filename:
        resume_text = extract_resume_text(upload.filename, upload.read())
        file_name = upload.filename
    elif content:
        resume_text = content
        file_name = None
    else:
        return jsonify({"message": "Resume file or content is required"}), 400

    if not resume_text.strip():
        return jsonify({"message": "Resume content is empty"}), 400

    field = _optional_string(payload, 'field') or CONFIG["default_field"]
    resume = _store().create_resume(resume_text, file_name=file_name, field=field)
    print(f"📄 Resume stored with id {resume.id}")

    suggestions = asyncio.run(_assistant().generate_suggestions(resume_text, field))
    for suggestion in suggestions:
        _store().create_suggestion("resume_improvement", suggestion)

    return jsonify(resume.model_dump(mode="json", by_alias=True))


@api.route('/resumes', methods=['GET'])
def list_resumes():
    return jsonify([r.model_dump(mode="json", by_alias=True) for r in _store().get_resumes()])


@api.route('/resumes/<int:resume_id>', methods=['GET'])
def get_resume(resume_id):
    resume = _store().get_resume(resume_id)
    if not resume:
        return jsonify({"message": "Resume not found"}), 404
    return jsonify(resume.model_dump(mode="json", by_alias=True))


@api.route('/resumes/<int:resume_id>', methods=['PATCH'])
def update_resume(resume_id):
    """Saves edited resume content, e.g. after accepting a tailored version."""
    content = _optional_string(_payload(), 'content') or ''
    if not content.strip():
        return jsonify({"message": "Content is required"}), 400
    resume = _store().update_resume(resume_id, content)
    if not resume:
        return jsonify({"message": "Resume not found"}), 404
    return jsonify(resume.model_dump(mode="json", by_alias=True))


# --- JOB ROUTES ---
@api.route('/jobs', methods=['POST'])
def create_job():
    try:
        job_data = NewJob.model_validate(_payload())
    except ValidationError as e:
        return jsonify({"message": "Invalid job data", "errors": _validation_errors(e)}), 400
    job = _store().create_job(job_data)
    return jsonify(job.model_dump(mode="json", by_alias=True))


@api.route('/jobs', methods=['GET'])
def list_jobs():
    return jsonify([j.model_dump(mode="json", by_alias=True) for j in _store().get_jobs()])


# --- WORKFLOW ROUTES ---
@api.route('/analyze-match', methods=['POST'])
def analyze_match():
    """Runs the ATS match analysis for a resume and job description."""
    payload = _payload()
    resume_text, _ = _resolve_resume(payload)
    try:
        analysis = asyncio.run(_assistant().analyze_match(resume_text, _job_text(payload)))
    except (CompletionFailed, ParseFailed) as e:
        print(f"❌ Error analyzing match: {e}")
        return jsonify({"message": "Failed to analyze job match"}), 500
    return jsonify(analysis.model_dump(by_alias=True))


@api.route('/tailor-resume', methods=['POST'])
def tailor_resume():
    payload = _payload()
    resume_text, resume = _resolve_resume(payload)
    field = payload.get('field') or (resume.field if resume else None)
    try:
        tailored_content = asyncio.run(_assistant().tailor_resume(resume_text, _job_text(payload), field))
    except CompletionFailed as e:
        print(f"❌ Error tailoring resume: {e}")
        return jsonify({"message": "Failed to tailor resume"}), 500
    return jsonify({"tailoredContent": tailored_content})


@api.route('/generate-cover-letter', methods=['POST'])
def generate_cover_letter():
    payload = _payload()
    resume_text, _ = _resolve_resume(payload)
    try:
        cover_letter = asyncio.run(_assistant().generate_cover_letter(
            resume_text,
            _job_text(payload),
            payload.get('companyName') or '',
            tone=payload.get('tone'),
            hiring_manager=payload.get('hiringManager'),
        ))
    except CompletionFailed as e:
        print(f"❌ Error generating cover letter: {e}")
        return jsonify({"message": "Failed to generate cover letter"}), 500
    return jsonify({"coverLetter": cover_letter})


@api.route('/suggestions/generate', methods=['POST'])
def generate_suggestions():
    payload = _payload()
    resume_text, resume = _resolve_resume(payload)
    field = payload.get('field') or (resume.field if resume else None)
    return jsonify(asyncio.run(_assistant().generate_suggestions(resume_text, field)))


# --- APPLICATION TRACKER ROUTES ---
@api.route('/applications', methods=['POST'])
def create_application():
    try:
        application_data = NewApplication.model_validate(_payload())
    except ValidationError as e:
        return jsonify({"message": "Invalid application data", "errors": _validation_errors(e)}), 400
    application = _store().create_application(application_data)
    return jsonify(application.model_dump(mode="json", by_alias=True))


@api.route('/applications', methods=['GET'])
def list_applications():
    return jsonify([a.model_dump(mode="json", by_alias=True) for a in _store().get_applications()])


@api.route('/applications/stats', methods=['GET'])
def application_stats():
    return jsonify(_store().application_stats().model_dump(by_alias=True))


@api.route('/applications/<int:application_id>/status', methods=['PATCH'])
def update_application_status(application_id):
    status = _payload().get('status')
    if not status:
        return jsonify({"message": "Status is required"}), 400
    if status not in CONFIG["application_statuses"]:
        allowed = ", ".join(CONFIG["application_statuses"])
        return jsonify({"message": f"Invalid status. Expected one of: {allowed}"}), 400

    application = _store().update_application_status(application_id, ApplicationStatus(status))
    if not application:
        return jsonify({"message": "Application not found"}), 404
    return jsonify(application.model_dump(mode="json", by_alias=True))


@api.route('/applications/<int:application_id>/cover-letter', methods=['PATCH'])
def update_application_cover_letter(application_id):
    cover_letter = _optional_string(_payload(), 'coverLetter')
    if cover_letter is None:
        return jsonify({"message": "coverLetter is required"}), 400
    application = _store().update_application_cover_letter(application_id, cover_letter)
    if not application:
        return jsonify({"message": "Application not found"}), 404
    return jsonify(application.model_dump(mode="json", by_alias=True))


# --- AI SUGGESTION ROUTES ---
@api.route('/suggestions', methods=['GET'])
def list_suggestions():
    return jsonify([s.model_dump(mode="json", by_alias=True) for s in _store().get_suggestions()])


@api.route('/suggestions/<int:suggestion_id>/apply', methods=['POST'])
def apply_suggestion(suggestion_id):
    suggestion = _store().mark_suggestion_applied(suggestion_id)
    if not suggestion:
        return jsonify({"message": "Suggestion not found"}), 404
    return jsonify(suggestion.model_dump(mode="json", by_alias=True))


# --- MAIN EXECUTION ---
if __name__ == '__main__':
    load_dotenv()
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise SystemExit("❌ OPENAI_API_KEY is not set. Add it to your environment or .env file.")

    app = create_app(build_assistant(api_key), JsonStore(CONFIG["data_dir"]))
    app.run(debug=True)
