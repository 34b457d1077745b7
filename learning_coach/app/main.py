"""
Learning Coach - Main Application Entry Point

Initializes the Gradio UI and launches the web interface. The Gemini API key
stays on this server; browsers only talk to the Gradio app.
"""
import logging

from learning_coach.config import settings as config
from learning_coach.ui.gradio_app import create_gradio_ui


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main():
    """
    Main entry point for the Learning Coach application.

    Initializes the Gradio interface and launches the web server.
    """
    configure_logging(config.LOG_LEVEL)
    demo = create_gradio_ui(config)
    print("\n🚀 Launching Learning Coach...")

    server_name = config.GRADIO_SERVER_NAME
    server_port = config.GRADIO_SERVER_PORT
    print(f"📍 Server will be available at http://{server_name}:{server_port}")

    # Pass theme and css to launch() for Gradio 6.0+
    demo.launch(
        server_name=server_name,
        server_port=server_port,
        theme=demo.theme,
        css=demo.css
    )


if __name__ == "__main__":
    main()
