"""Cover letter prompt construction."""

from __future__ import annotations

from datetime import date

from covergen.lib.models.models import ContactRecord

NOT_PROVIDED = "Not provided"

PROMPT_TEMPLATE = """\
You are a professional cover letter writer. Using the provided resume and job description,
create a compelling cover letter that highlights the candidate's relevant skills and experiences.

Important formatting instructions:
1. Structure the cover letter properly with the candidate's contact information at the top
2. Use the candidate's actual name, phone, email, and address from their resume
3. Use the current date: {current_date}
4. Do NOT use markdown or "--" in the response
5. Format as a proper business letter with correct structure:
   - Contact info at top (name, address, phone, email, LinkedIn)
   - Date
   - Recipient address (use company from job description)
   - Salutation
   - Body paragraphs
   - Closing
   - Signature line with name
6. DO NOT repeat contact information at the end
7. Make sure the cover letter flows naturally and professionally
8. Keep the cover letter concise - approximately 3-4 paragraphs total
9. Focus on the most relevant experiences and skills
10. Use clear, professional language

Resume:
{resume_text}

Job Description:
{job_description}

Contact Information from Resume:
Name: {name}
Address: {address}
Phone: {phone}
Email: {email}
LinkedIn: {linkedin}

Cover Letter:
"""


def format_letter_date(d: date) -> str:
    """Format a date the way a US business letter does, e.g. ``January 1, 2024``."""
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def build_prompt(
    resume_text: str,
    job_description: str,
    contact: ContactRecord,
    current_date: date | str,
) -> str:
    """Assemble the single provider-agnostic instruction for the LLM."""
    if isinstance(current_date, date):
        current_date = format_letter_date(current_date)

    return PROMPT_TEMPLATE.format(
        current_date=current_date,
        resume_text=resume_text,
        job_description=job_description,
        name=contact.name or NOT_PROVIDED,
        address=contact.address or NOT_PROVIDED,
        phone=contact.phone or NOT_PROVIDED,
        email=contact.email or NOT_PROVIDED,
        linkedin=contact.linkedin or NOT_PROVIDED,
    )
