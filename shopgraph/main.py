# shopgraph/main.py
import asyncio
import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from strawberry.fastapi import GraphQLRouter

from . import config
from .database import create_tables, engine, ensure_database_exists
from .graphql import schema
from .repository import CartRepository, ProductRepository
from .resolvers import ShopResolvers

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def create_app(db_engine: AsyncEngine = engine, bootstrap_database: bool = True) -> FastAPI:
    session_maker = async_sessionmaker(db_engine, expire_on_commit=False, class_=AsyncSession)
    resolvers = ShopResolvers(ProductRepository(session_maker), CartRepository(session_maker))

    async def get_context():
        return {"resolvers": resolvers}

    app = FastAPI(
        title="shopgraph",
        description="Products and shopping cart over GraphQL",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if config.GRAPHIQL else None,
    )
    app.include_router(graphql_app, prefix="/graphql")

    @app.get("/")
    async def root():
        return {"message": "shopgraph API is running", "graphql": "/graphql"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.on_event("startup")
    async def on_startup():
        if not bootstrap_database:
            return
        # Create the database if missing; run in a thread since psycopg2 blocks.
        try:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, ensure_database_exists, db_engine.url.render_as_string(hide_password=False))
        except Exception as e:
            # create_all below still connects and raises a clear error if the DB is unusable
            logger.warning("Could not ensure database exists: %s", e)

        # Development convenience. In production use migrations (alembic).
        await create_tables(db_engine)
        logger.info("Tables ready on %s", db_engine.url.host or db_engine.url.database)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server running at http://localhost:%s/graphql", config.PORT)
    uvicorn.run("shopgraph.main:app", host=config.HOST, port=config.PORT, reload=True)
