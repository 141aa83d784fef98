"""
Prompts for Daily Report Generation
All prompts used in the application
"""

from typing import List

from daily_report.activities import format_activity_line
from daily_report.models import Activity

# The summary header always sits at this fixed time
SUMMARY_HEADER = "06:00 PM – Summary of today"

# System prompt for report composition
SYSTEM_PROMPT = f"""You are an AI assistant that generates professional daily work reports.
Your primary task is to create a SIMPLE, CLEAR, and ACCURATE daily summary,
following the exact style and logic shown in the examples.

SUMMARY BEHAVIOR (CRITICAL):
- The summary is NOT a rewrite of all activities.
- The summary is an extraction of FINAL STATUS and KEY OUTCOMES.
- Group activities by ticket or topic when applicable.
- Avoid duplicate points for the same ticket.

SUMMARY LOGIC RULES:
1. If an activity explicitly states "Solved", summarize it as:
   - "Solved <TICKET>"
2. If work was started or continued but not solved, summarize as:
   - "Worked on <TICKET>"
3. If discussion or calls happened without solving, summarize as:
   - "Discussed <TICKET> with support"
4. If a solution is done but not approved or still under investigation, preserve the context:
   - Example: "Worked on <TICKET> (solution done but not approved, still investigating)"
5. If multiple tickets are discussed together, they may be combined in one bullet when appropriate.
6. Non-ticket activities (request, waiting, receiving database) should be summarized only if meaningful.

TIME RULES:
- Never modify user-provided times or descriptions.
- Never infer or add new activities.
- The summary must always appear at exactly:
  "{SUMMARY_HEADER}"

CONTENT RULES:
- Ignore breaks unless explicitly stated as important.
- Do NOT hallucinate tasks, tickets, or conclusions.
- Use professional workplace language.
- Keep bullet points short and direct.
- Do NOT include explanations or commentary.

OUTPUT RULES:
- Output must be clean and suitable for Word or PDF export.
- No emojis.
- No extra blank lines.
- No markdown.
- Plain professional text only.

Follow the style demonstrated in the provided examples EXACTLY."""

# Template for the user message
USER_PROMPT_TEMPLATE = """Generate a professional daily work report for {date}.

Input activities:
{activities}

Output format (STRICT):
Daily Report – {date}

[List all activities exactly as provided, preserving times and descriptions]
{summary_header}
- [Bullet point summarizing key accomplishments]
- [Bullet point summarizing key accomplishments]
- [Additional bullet points as needed]

IMPORTANT FORMATTING:
- Blank lines between date and activities
- Text bold for date and time
- NO blank lines between activities
- NO blank lines between "{summary_header}" and the bullet points
- Keep consistent single-line spacing throughout

Remember:
1. Do not modify any times or descriptions
2. Add the summary at exactly 06:00 PM
3. Make the summary professional and concise
4. Only reference activities that were actually performed"""


def build_user_prompt(date: str, activities: List[Activity]) -> str:
    """Fill the user prompt with the report date and one line per activity."""
    activities_list = '\n'.join(format_activity_line(activity) for activity in activities)
    return USER_PROMPT_TEMPLATE.format(
        date=date,
        activities=activities_list,
        summary_header=SUMMARY_HEADER,
    )
