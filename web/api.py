from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from core.calculator import compute
from core.errors import InvalidInputError
from web.forms import FormState
from web.schemas import (
    INTERNAL_ERROR,
    REQUIRED_FIELDS_ERROR,
    ErrorResponse,
    PizzaPricingData,
    PizzaPricingResponse,
)
from web.settings import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Pizza Price API", version="1.0.0")

# UI може жити на іншому порту/домені
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/api/pizza",
    response_model=PizzaPricingResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def pizza(request: Request) -> JSONResponse:
    """
    Основний endpoint: {pizzaSize, pizzaCost, crustSize?} -> ціна за кв. дюйм.

    Тіло читаємо вручну: битий JSON має давати 500, а не 422 від FastAPI.
    """
    try:
        body = await request.json()
        if not isinstance(body, dict):
            raise TypeError(f"expected a JSON object, got {type(body).__name__}")

        pizza_size = body.get("pizzaSize")
        pizza_cost = body.get("pizzaCost")
        crust_size = body.get("crustSize")

        if not pizza_size or not pizza_cost:
            logger.info("rejected pizza request: size=%r cost=%r", pizza_size, pizza_cost)
            return _error(400, REQUIRED_FIELDS_ERROR)

        # порожній/нульовий crustSize = "бортик не цікавить"
        result = compute(pizza_size, pizza_cost, crust_size or None)
        payload = PizzaPricingResponse(data=PizzaPricingData.from_result(result))
        return JSONResponse(content=payload.to_json())
    except InvalidInputError as e:
        logger.info("invalid pizza input: %s", e)
        return _error(400, str(e))
    except Exception:
        logger.exception("pizza request failed")
        return _error(500, INTERNAL_ERROR)


@app.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "pizza.html", {"state": FormState()})


@app.post("/", response_class=HTMLResponse)
def submit(
    request: Request,
    pizza_size: str = Form(""),
    pizza_cost: str = Form(""),
    cares_about_crust: bool = Form(False),
    crust_size: str = Form(""),
) -> HTMLResponse:
    """HTML-форма: рахуємо на сервері і рендеримо ту ж сторінку з результатом."""
    state = FormState(
        pizza_size=pizza_size,
        pizza_cost=pizza_cost,
        cares_about_crust=cares_about_crust,
        crust_size=crust_size,
    )
    state.submit()
    status_code = 400 if state.errors else 200
    return templates.TemplateResponse(request, "pizza.html", {"state": state}, status_code=status_code)
