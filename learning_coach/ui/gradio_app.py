import gradio as gr
from learning_coach.core.generation_client import GenerationClient
from learning_coach.core.session import SessionController
from learning_coach.services.webhook import AnalyticsWebhook
from learning_coach.ui.formatter import (
    format_error_markdown,
    format_learning_drop_markdown,
    format_sources_markdown,
)
from learning_coach.ui.css import custom_css
from learning_coach.config import settings
import logging

logger = logging.getLogger(__name__)

# (field name, label, placeholder, required)
TEXT_FIELDS = [
    ("name", "Name", "", True),
    ("email", "Email", "", True),
    ("area", "Area (e.g., Marketing, Engineering)", "", False),
    ("country", "Country", "e.g., Colombia", True),
    ("current_position", "Current Position", "", False),
    ("time_in_current_role", "Time in Current Role", "e.g., 1 year 3 months", False),
    ("time_available_per_week", "Time Available Per Week", "e.g., 3-5 hours", False),
    ("short_term_goals", "Short-Term Goals (6-12 months)", "", False),
    ("long_term_goals", "Long-Term Goals (1-2 years)", "", False),
    ("hard_skills", "Hard Skills to Develop (up to 3)", "e.g., SQL, Figma, React", False),
    ("soft_skills", "Soft Skills to Develop (up to 3)", "e.g., Public Speaking, Leadership", False),
    ("additional_comments", "Additional Comments", "", False),
]
TEXTAREA_FIELDS = {"short_term_goals", "long_term_goals", "additional_comments"}
FIELD_LAYOUT = [
    ["name", "email"],
    ["area", "country"],
    ["current_position", "time_in_current_role", "time_available_per_week"],
    ["short_term_goals"],
    ["long_term_goals"],
    ["hard_skills", "soft_skills"],
]

LOADING_MESSAGE = "⏳ Generating your Learning Drop..."


def apply_form_values(controller, text_values, preferences, price_preference):
    """Copy the submitted form into the session profile."""
    for (name, _, _, _), value in zip(TEXT_FIELDS, text_values):
        if value != getattr(controller.profile, name):
            controller.update_field(name, value or "")

    current = {pref.value for pref in controller.profile.learning_preferences}
    selected = set(preferences or [])
    # Newly selected formats are appended in checkbox order
    for pref in controller.learning_preferences:
        if pref.value in current ^ selected:
            controller.toggle_preference(pref)

    if price_preference:
        controller.update_field("price_preference", price_preference)


def missing_required_fields(text_values):
    return [
        label for (_, label, _, required), value in zip(TEXT_FIELDS, text_values)
        if required and not (value or "").strip()
    ]


def render_state(controller):
    """Map session state to (drop, sources, error, generate button, regenerate button) updates."""
    state = controller.state
    result = state.last_result
    busy = state.is_generating

    return (
        gr.update(value=format_learning_drop_markdown(state.blocks), visible=result is not None),
        gr.update(value=format_sources_markdown(result.sources) if result else "", visible=bool(result and result.sources)),
        gr.update(value=format_error_markdown(state.error_message), visible=bool(state.error_message)),
        gr.update(value="Generating..." if busy else "Generate My Learning Drop", interactive=not busy),
        gr.update(value="Regenerating..." if busy else "🔄 Regenerate", interactive=not busy, visible=result is not None),
    )


def create_gradio_ui(config=settings):
    client = GenerationClient(config)
    webhook = AnalyticsWebhook.from_config(config)
    default_profile = SessionController(config, client).profile

    if not client.is_available():
        logger.warning("GOOGLE_API_KEY not set; generation will fail until it is configured")

    def get_controller(controller):
        return controller if controller is not None else SessionController(config, client, webhook)

    async def run_generation(controller, regenerate, form_values):
        controller = get_controller(controller)
        text_values = form_values[:len(TEXT_FIELDS)]
        preferences, price_preference = form_values[len(TEXT_FIELDS):]

        missing = missing_required_fields(text_values)
        if missing:
            gr.Warning(f"Please fill in: {', '.join(missing)}")
            yield (controller, gr.update(visible=False), *render_state(controller))
            return

        if controller.state.is_generating:
            return

        apply_form_values(controller, text_values, preferences, price_preference)

        # Show the loading state before the model call suspends
        yield (
            controller,
            gr.update(value=LOADING_MESSAGE, visible=True),
            gr.update(value="", visible=False),
            gr.update(value="", visible=False),
            gr.update(value="", visible=False),
            gr.update(value="Generating...", interactive=False),
            gr.update(interactive=False),
        )

        if regenerate:
            await controller.regenerate()
        else:
            await controller.submit()

        yield (controller, gr.update(value="", visible=False), *render_state(controller))

    async def generate_handler(controller, *form_values):
        async for update in run_generation(controller, False, form_values):
            yield update

    async def regenerate_handler(controller, *form_values):
        async for update in run_generation(controller, True, form_values):
            yield update

    theme = gr.themes.Base(
        primary_hue="pink",
        secondary_hue="purple",
        neutral_hue="gray",
        font=("Inter", "system-ui", "sans-serif"),
    ).set(
        body_background_fill="#23174B",
        body_background_fill_dark="#23174B",
        block_background_fill="#3a2356",
        block_background_fill_dark="#3a2356",
        block_border_color="#6D2F5A",
        block_border_color_dark="#6D2F5A",
        input_background_fill="#23174B",
        input_background_fill_dark="#23174B",
        button_primary_background_fill="#FF5A70",
        button_primary_background_fill_dark="#FF5A70",
        button_primary_text_color="white",
        button_primary_text_color_dark="white",
    )

    with gr.Blocks(title="Ontop Learning Coach") as demo:
        session_state = gr.State(None)

        gr.Markdown(
            "# Ontop Learning Coach\nYour personal AI guide to crushing your career goals.",
            elem_id="coach-header",
        )

        field_specs = {field[0]: field for field in TEXT_FIELDS}
        inputs = {}

        def make_textbox(name):
            _, label, placeholder, _ = field_specs[name]
            inputs[name] = gr.Textbox(
                label=label,
                value=getattr(default_profile, name),
                placeholder=placeholder,
                lines=3 if name in TEXTAREA_FIELDS else 1,
            )

        with gr.Column(elem_id="profile-form"):
            for row in FIELD_LAYOUT:
                with gr.Row():
                    for name in row:
                        make_textbox(name)

            preferences_input = gr.CheckboxGroup(
                choices=list(getattr(config, 'LEARNING_PREFERENCES', [])),
                value=[pref.value for pref in default_profile.learning_preferences],
                label="Learning Preferences",
            )
            price_input = gr.Radio(
                choices=[(label, value) for value, label in getattr(config, 'PRICE_PREFERENCES', [])],
                value=default_profile.price_preference.value,
                label="Price Preference",
            )

            make_textbox("additional_comments")

            generate_btn = gr.Button("Generate My Learning Drop", variant="primary", size="lg")

        status_display = gr.Markdown(value="", visible=False, elem_id="status-display")
        error_display = gr.Markdown(value="", visible=False, elem_id="error-display")

        with gr.Column(elem_id="learning-drop-output"):
            regenerate_btn = gr.Button("🔄 Regenerate", size="sm", visible=False)
            drop_display = gr.Markdown(value="", visible=False)
            sources_display = gr.Markdown(value="", visible=False, elem_id="sources-display")

        form_inputs = [inputs[name] for name, _, _, _ in TEXT_FIELDS] + [preferences_input, price_input]
        outputs = [
            session_state,
            status_display,
            drop_display,
            sources_display,
            error_display,
            generate_btn,
            regenerate_btn,
        ]

        # Sessions are independent, so don't serialize generations across users
        generate_btn.click(
            generate_handler,
            inputs=[session_state] + form_inputs,
            outputs=outputs,
            concurrency_limit=None,
        )
        regenerate_btn.click(
            regenerate_handler,
            inputs=[session_state] + form_inputs,
            outputs=outputs,
            concurrency_limit=None,
        )

    # Attach theme and css to demo for Gradio 6.0
    demo.theme = theme
    demo.css = custom_css
    return demo
