import os
import sys
import json
import asyncio
from datetime import datetime
from dotenv import load_dotenv

# --- IMPORTS FROM YOUR PROJECT ---

# This block adds the project's root directory to Python's search path.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from app import build_assistant
from utils import ensure_directory_exists

# --- SETUP ---
load_dotenv()

# ============================================================================
# SCRIPT CONFIGURATION
#
# Edit the variables below to configure your live run against OpenAI.
# ============================================================================

RESUME_TEXT = (
    "Jane Smith\n"
    "Backend Engineer with 5 years Python backend experience.\n"
    "- Built REST APIs with Flask serving 2M requests/day\n"
    "- Migrated batch jobs to Celery, cutting runtime by 40%"
)
JOB_TEXT = "Seeking Python developer with AWS skills to build scalable backend services."
FIELD = "Technology"
COMPANY_NAME = "Acme Cloud"
TONE = "enthusiastic"
HIRING_MANAGER = None

OUTPUT_DIRECTORY = "tests/test_output"

# ============================================================================


async def run_workflows(assistant) -> dict:
    analysis = await assistant.analyze_match(RESUME_TEXT, JOB_TEXT)
    tailored = await assistant.tailor_resume(RESUME_TEXT, JOB_TEXT, FIELD)
    cover_letter = await assistant.generate_cover_letter(RESUME_TEXT, JOB_TEXT, COMPANY_NAME, TONE, HIRING_MANAGER)
    suggestions = await assistant.generate_suggestions(RESUME_TEXT, FIELD)
    return {
        "analysis": analysis.model_dump(by_alias=True),
        "tailoredContent": tailored,
        "coverLetter": cover_letter,
        "suggestions": suggestions,
    }


def run_test():
    """
    Runs all four workflows once against the live API and saves the output.
    """
    print("--- Starting Application Assistant Live Test ---")

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        print("❌ ERROR: OPENAI_API_KEY is not set.")
        return

    ensure_directory_exists(OUTPUT_DIRECTORY)

    try:
        results = asyncio.run(run_workflows(build_assistant(api_key)))

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = os.path.join(OUTPUT_DIRECTORY, f"assistant_run_{timestamp}.json")
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=4)

        print(f"\n✅ Test finished successfully!")
        print(f"📄 Output saved to: {output_path}")

    except Exception as e:
        print(f"\n❌ An error occurred: {e}")
    finally:
        print("--- Test Complete ---")


if __name__ == "__main__":
    run_test()
