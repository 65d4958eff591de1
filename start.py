#!/usr/bin/env python3
import os
from dotenv import load_dotenv
from eventhub import create_app

# Load environment variables
load_dotenv()

# Create the Flask application (tables and seed data are created on startup)
app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 3000))
    app.logger.info(f"Event Hub API running on http://localhost:{port}/api")
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG", "0") == "1", threaded=True)
