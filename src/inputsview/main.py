from __future__ import annotations

from contextlib import asynccontextmanager
from functools import partial

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inputsview.api.inputs.controller import router as inputs_router
from inputsview.api.metrics.controller import router as metrics_router
from inputsview.config import load_config
from inputsview.core.controller import InputListController
from inputsview.logging_config import setup_logging
from inputsview.stores import InputsStore, NodeStore, load_inputs_file, load_node_file


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_config()
    setup_logging(config.log_level, config.log_file)

    inputs_store = InputsStore(partial(load_inputs_file, config.inputs_path), background=config.background_refresh)
    node_store = NodeStore(partial(load_node_file, config.node_path), background=config.background_refresh)
    controller = InputListController(inputs_store, node_store, permissions=config.permissions)

    app.state.stores = [inputs_store, node_store]
    app.state.controller = controller
    controller.activate()
    try:
        yield
    finally:
        controller.teardown()
        inputs_store.close()
        node_store.close()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(inputs_router)
app.include_router(metrics_router)


def main() -> None:
    load_dotenv(override=True)

    import uvicorn
    print("[inputsview] API server starting on http://localhost:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="warning")


if __name__ == "__main__":
    main()
