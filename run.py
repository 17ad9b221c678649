"""Development server entry point."""
import logging

from messenger_translator import create_app

app = create_app()

if __name__ == "__main__":
    port = app.config["PORT"]
    logging.info(f"Server is running on port {port}")
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
