# Configuration constants

CONFIG = {
    "data_dir": "./data/store",
    "openai_model": "gpt-4o",
    "openai_parameters": {"max_tokens": 4096, "temperature": 0.2},
    "request_timeout_s": 60.0,
    "max_input_chars": 50000,
    "default_field": "General",
    "upload": {
        "max_bytes": 5 * 1024 * 1024,
        "allowed_extensions": [".pdf", ".txt"],
    },
    "application_statuses": ["applied", "interview", "rejected", "offer"],
}

# --------------------------------------------------------------------------
# Match Analysis Prompt
# --------------------------------------------------------------------------

MATCH_ANALYSIS_PROMPT = (
    "Analyze the compatibility between this resume and job description for ATS (Applicant Tracking System) scoring.\n\n"
    "Resume:\n{resume_text}\n\n"
    "Job Description:\n{job_text}\n\n"
    "Provide a detailed analysis as a JSON object with exactly these four fields and nothing else:\n"
    "1.  **matchScore**: An integer from 0 to 100 indicating how well the resume matches the job.\n"
    "2.  **missingKeywords**: Array of important keywords/skills from the job description that are missing from the resume.\n"
    "3.  **strongMatches**: Array of keywords/skills that match well between the resume and the job.\n"
    "4.  **suggestions**: Array of specific, actionable suggestions to improve the match.\n\n"
    "Respond with valid JSON only."
)

# --------------------------------------------------------------------------
# Resume Tailoring Prompt
# --------------------------------------------------------------------------

TAILOR_PROMPT = (
    "You are an expert resume coach specializing in {field}. Tailor this resume to match the job description "
    "while maintaining authenticity and professional formatting.\n\n"
    "Original Resume:\n{resume_text}\n\n"
    "Job Description:\n{job_text}\n\n"
    "**Instructions:**\n"
    "1.  Optimize keywords to match the job description.\n"
    "2.  Emphasize the experience and skills that are relevant to the role.\n"
    "3.  Align job titles and descriptions with the target role only where the original content supports it.\n"
    "4.  Maintain the original structure and formatting.\n"
    "5.  Keep all information truthful and based on the original content.\n"
    "6.  **Do Not Invent:** Never fabricate experience, employers, dates, skills or qualifications.\n"
    "7.  Focus on {field}-specific terminology and requirements.\n\n"
    "Return the tailored resume content maintaining professional formatting."
)

# --------------------------------------------------------------------------
# Cover Letter Prompt
# --------------------------------------------------------------------------

TONE_INSTRUCTIONS = {
    "professional": "Use a professional, formal tone that demonstrates competence and reliability.",
    "enthusiastic": "Use an enthusiastic, energetic tone that shows passion and excitement for the role.",
    "conversational": "Use a conversational, approachable tone that feels personable while remaining professional.",
    "formal": "Use a formal, traditional business tone that emphasizes respect and hierarchy.",
}

COVER_LETTER_PROMPT = (
    "Write a compelling cover letter based on this resume and job description.\n\n"
    "Resume:\n{resume_text}\n\n"
    "Job Description:\n{job_text}\n\n"
    "Company: {company_name}\n"
    "Tone: {tone_instruction}\n\n"
    "**Instructions:**\n"
    "1.  Start with \"{greeting}\"\n"
    "2.  Create 3-4 paragraphs that highlight relevant experience.\n"
    "3.  Show enthusiasm for the specific role and company.\n"
    "4.  Include specific examples from the resume that match the job requirements.\n"
    "5.  End with a professional closing.\n"
    "6.  Keep it concise (under {max_words} words).\n"
    "7.  Make it ATS-friendly with relevant keywords.\n"
    "8.  Avoid generic phrases and make it specific to this job.\n\n"
    "Return only the cover letter content."
)

COVER_LETTER_MAX_WORDS = 400

# --------------------------------------------------------------------------
# Suggestions Prompt
# --------------------------------------------------------------------------

SUGGESTIONS_PROMPT = (
    "Analyze this {field} resume and provide 3-5 specific, actionable improvement suggestions.\n\n"
    "Resume:\n{resume_text}\n\n"
    "Focus on:\n"
    "1.  Missing skills relevant to {field}.\n"
    "2.  Ways to quantify achievements better.\n"
    "3.  Keyword optimization for ATS.\n"
    "4.  Structure and formatting improvements.\n"
    "5.  Industry-specific recommendations.\n\n"
    "Provide the suggestions as a JSON array of strings under a `suggestions` key, "
    "for example {{\"suggestions\": [\"...\", \"...\"]}}. Respond with valid JSON only."
)
