"""
Learning Coach - Personalized Learning Drops

Collects a career-development profile through a Gradio form and asks Gemini,
grounded with Google Search, for four verified learning resources.

Main Modules:
- core: profile schemas, prompt builder, Gemini client, response parser, session controller
- services: analytics webhook and CSV resource catalog collaborators
- ui: Gradio form and Learning Drop rendering
- app: Main application entry point

Usage:
    # Run the Gradio UI
    python -m learning_coach.app.main

    # Or drive a session directly
    from learning_coach.core.session import SessionController
    controller = SessionController(config, client)
    await controller.submit()
"""

__version__ = "0.1.0"
__author__ = "Learning Coach Team"

__all__ = ["__version__", "__author__"]
