"""
Learning Drop prompt.

The output-format section is a contract with response_parser: the title
marker, subsection markers and entry layout below are exactly what the parser
recognizes.
"""

from typing import List, Optional

from learning_coach.core.schemas import LearningFormat, Profile

TITLE_MARKER = "Your Learning Drop"
TITLE_LINE = f"{TITLE_MARKER} 🚀"
HARD_SKILLS_MARKER = "**Hard Skills**"
SOFT_SKILLS_MARKER = "**Soft Skills**"
RESOURCE_SEPARATOR = " — "
RESOURCES_PER_SECTION = 2


def format_preferences(preferences: List[LearningFormat]) -> str:
    """Render preferences as 'Books 📚, Courses 🎓'."""
    return ", ".join(f"{pref.value} {pref.emoji}" for pref in preferences)


def _parenthesized(text: str) -> str:
    return f" ({text})" if text else ""


def get_regeneration_instruction(previous_message: Optional[str]) -> str:
    """
    Get the section asking for a disjoint set of resources.

    Args:
        previous_message: Learning Drop from the previous attempt

    Returns:
        Instruction block, or "" when there is nothing to avoid
    """
    if not previous_message:
        return ""
    return f"""
### CRITICAL REGENERATION INSTRUCTION
The previous recommendations were unsatisfactory. You MUST provide a COMPLETELY NEW set of resources. DO NOT repeat any links, topics, or recommendations from the previous attempt shown below.

<PREVIOUS_UNSATISFACTORY_RESPONSE>
{previous_message}
</PREVIOUS_UNSATISFACTORY_RESPONSE>
"""


def get_verification_protocol(country: str) -> str:
    """Get the link verification steps, localized to the user's country."""
    country_text = country or "the user's country"
    return f"""---
### **MANDATORY COMMAND: LINK VERIFICATION PROTOCOL**
Your primary function is to provide links that are **100% functional, public, and accessible in {country_text}.** A broken or inaccessible link is a failure. Follow the protocol below without deviation.

**Step 1: DISCOVER VIA LOCALIZED SEARCH.**
*   Use the Google Search tool. Do not rely on internal knowledge.
*   The search query MUST include the user's country: **'{country_text}'**.
*   Example: "best free Go programming course available in Colombia"

**Step 2: REGIONAL ACCESSIBILITY CHECK.**
*   Analyze the search result snippet for the URL.
*   If ANY text suggests regional blocking (e.g., "not available in your country", "content blocked in your region"), DISCARD the resource and move to the next candidate.

**Step 3: PUBLIC & DIRECT ACCESS CHECK.**
*   Re-analyze the same snippet.
*   If ANY text suggests it is not public or direct (e.g., "private video", "login to view", "404 not found", "enrollment closed", "video unavailable", "This video has been removed", "This account has been terminated"), DISCARD it.
*   Videos: YouTube links have a high failure rate. If a YouTube result fails this step, immediately search for the resource on an alternative platform such as **Vimeo** before giving up on it.

**Step 4: INTERNAL VERIFICATION MANIFEST.**
*   For every resource that passed Steps 1-3, document internally (not in the output):
    ```
    ### Internal Manifest: [Skill Name] ###
    1.  **URL:** [The exact URL]
    2.  **Proof Query:** "[The exact, country-specific Google Search query used]"
    3.  **Access Evidence:** "[Snippet quote proving it is public and regionally accessible]"
    4.  **Final Verdict:** "PASSED for {country_text}."
    ```

**Step 5: FINAL AUTHORIZATION.**
*   Only include a resource if it has a "PASSED" manifest.
*   Before writing the final message, check that every URL in the planned output has a "PASSED" manifest. If not, restart the process for the failed resource.
---"""


def get_output_rules(profile: Profile, preferences_text: str) -> str:
    """Get the selection rules and the fixed output-format contract."""
    price = profile.price_preference.value
    country_text = profile.country or "the user's country"
    emojis = " ".join(fmt.emoji for fmt in LearningFormat)
    entry_format = f"[**Skill Name**](Direct Link URL){RESOURCE_SEPARATOR}Price{RESOURCE_SEPARATOR}(Type 🎓)"

    return f"""### Output Generation Rules
1.  **Select 4 Resources:** Based on your verified search, select exactly 4 resources.
2.  **Adhere to Preferences:** ALL 4 resources MUST match the user's "Learning Preferences"{_parenthesized(preferences_text)}.
3.  **Balance Skills:** Provide exactly {RESOURCES_PER_SECTION} "Hard Skills" resources and exactly {RESOURCES_PER_SECTION} "Soft Skills" resources.
4.  **Adhere to Price:** Strictly follow the user's `Price Preference` ({price}). For paid resources, find the price in the local currency for **{country_text}**. If a reliable local price is not found, use the word "Paid". For free resources, use "Free".
5.  **Format Correctly:** Follow the output format and example below EXACTLY.
    *   The resource title MUST be the skill name (e.g., "System Design"), not the actual title of the content.
    *   Use "{RESOURCE_SEPARATOR.strip()}" (an em-dash surrounded by spaces) as the separator.
    *   No extra text, comments, or introductions.
    *   Include the correct emoji for the resource type: {emojis}.

### Output Format
Start with a personalized greeting using the user's name{_parenthesized(profile.name)}.
Add the title: {TITLE_LINE}
Add a subheading: {HARD_SKILLS_MARKER}
List the {RESOURCES_PER_SECTION} hard skill resources. Each entry must follow this exact format on a new line:
{entry_format}
Add a subheading: {SOFT_SKILLS_MARKER}
List the {RESOURCES_PER_SECTION} soft skill resources. Each entry must follow this exact format on a new line:
{entry_format}

Write a short, 1-2 sentence summary explaining why this specific combination of resources is a great fit.
End with a brief, motivational statement.

### Example Output
Hey Jane, your next challenge awaits.
{TITLE_LINE}

{HARD_SKILLS_MARKER}
[**System Design**](https://www.example.com/system-design-book){RESOURCE_SEPARATOR}$45 USD{RESOURCE_SEPARATOR}(Book 📚)
[**Go Programming**](https://www.example.com/go-book){RESOURCE_SEPARATOR}Free{RESOURCE_SEPARATOR}(Book 📚)

{SOFT_SKILLS_MARKER}
[**Technical Leadership**](https://www.example.com/tech-lead-article){RESOURCE_SEPARATOR}Free{RESOURCE_SEPARATOR}(Article 📰)
[**Mentorship**](https://www.example.com/mentorship-course){RESOURCE_SEPARATOR}Paid{RESOURCE_SEPARATOR}(Course 🎓)

This combo gives you the practical system design knowledge you need, with a foundational Go book and resources to help you think about your next career move as a leader.
Go crush it."""


def get_user_data_section(profile: Profile, preferences_text: str) -> str:
    return f"""### User Data
- Name: {profile.name}
- Email: {profile.email}
- Area: {profile.area}
- Country: {profile.country}
- Current Position: {profile.current_position}
- Time in Current Role: {profile.time_in_current_role}
- Short-Term Goals (6-12 months): {profile.short_term_goals}
- Long-Term Goals (1-2 years): {profile.long_term_goals}
- Hard Skills to Develop: {profile.hard_skills}
- Soft Skills to Develop: {profile.soft_skills}
- What type of format do you prefer for your training?: {preferences_text}
- Price Preference: {profile.price_preference.value}
- Time Available Per Week: {profile.time_available_per_week}
- Additional Comments: {profile.additional_comments}"""


def build_prompt(profile: Profile, previous_message: Optional[str] = None) -> str:
    """
    Build the Learning Drop prompt for a profile.

    Args:
        profile: User profile (read only)
        previous_message: Raw message of the previous drop, on regeneration

    Returns:
        Prompt text
    """
    preferences_text = format_preferences(profile.learning_preferences)

    return f"""
You are Ontop's Learning Coach AI. Your purpose is to provide personalized, on-brand career guidance. Your brand voice is bold, human, and confident.

{get_verification_protocol(profile.country)}

Your task is to analyze the user data below and generate a concise "{TITLE_MARKER}" message, following all instructions.
{get_regeneration_instruction(previous_message)}
{get_output_rules(profile, preferences_text)}

---

{get_user_data_section(profile, preferences_text)}

Generate the Learning Drop message now.
"""
