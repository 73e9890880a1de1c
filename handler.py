"""
AWS Lambda entry point — serves the inspector API through Mangum.

Behind a stage or custom-domain mapping, set API_BASE_PATH (e.g. "/prod")
so routes resolve the same as under uvicorn.
"""

from mangum import Mangum

from inspector.config import settings
from inspector.main import app

handler = Mangum(app, lifespan="off", api_gateway_base_path=settings.api_base_path)
