import argparse
import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from calculator.api.page import render_page
from calculator.configs import CalculatorConfig, load_config
from calculator.core.session import CalculationSession
from calculator.models import CalculateRequest, CalculateResponse, HistoryResponse
from calculator.services.form_handler import FormHandler, RESULT_PLACEHOLDER


logger = logging.getLogger(__name__)

def create_app(config: Optional[CalculatorConfig] = None) -> FastAPI:
    """Build the web calculator with its own calculation session"""
    config = config or load_config()

    app = FastAPI(
        title = config.web.title,
        version = "1.0.0"
    )

    session = CalculationSession(max_size=config.max_history_size)
    form_handler = FormHandler(session)
    app.state.form_handler = form_handler

    # Handlers are async and never await, so one event finishes before the next starts
    @app.get("/", response_class=HTMLResponse)
    async def index():
        return render_page(config.web.title, RESULT_PLACEHOLDER)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": config.web.title}

    @app.post("/calculate", response_model=CalculateResponse)
    async def calculate(request: CalculateRequest):
        try:
            response = form_handler.handle_calculate(request.num1, request.num2, request.operation)
            logger.info(f"Calculate {request.num1!r} {request.operation} {request.num2!r}: {response.message}")
            return response
        except Exception as e:
            logger.error(f"Error processing calculate request: {e}")
            raise HTTPException(status_code=500, detail=f"Error processing calculate request: {str(e)}")

    @app.post("/clear")
    async def clear_inputs():
        form_handler.handle_clear()
        return {"result": form_handler.result_text}

    @app.get("/history", response_model=HistoryResponse)
    async def get_history():
        return form_handler.history()

    @app.post("/history/clear", response_model=HistoryResponse)
    async def clear_history():
        logger.info("Clearing calculation history")
        return form_handler.handle_clear_history()

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the web calculator")
    parser.add_argument("--config", help="Path to a JSON or YAML configuration file")
    parser.add_argument("--host", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        logging.basicConfig(
            level=config.web.log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    except ValueError as e:
        parser.error(str(e))

    if args.host:
        config.web.host = args.host
    if args.port:
        config.web.port = args.port

    logger.info(f"Web calculator started on http://{config.web.host}:{config.web.port}")
    if args.reload or config.web.reload:
        # The reloader builds the app in a fresh process through the factory
        if args.config:
            os.environ["CALC_CONFIG"] = os.path.abspath(args.config)
        uvicorn.run(
            "calculator.api.server:create_app",
            factory=True,
            host=config.web.host,
            port=config.web.port,
            reload=True
        )
    else:
        uvicorn.run(create_app(config), host=config.web.host, port=config.web.port)


if __name__ == '__main__':
    main()
