"""Entry point wiring an engine to the variation and population adaptors."""

from __future__ import annotations

from types import TracebackType

from variation_query.core.config import AdaptorConfig
from variation_query.core.connection import ConnectionConfig
from variation_query.core.engine import Engine
from variation_query.core.registry import SQLRegistry
from variation_query.repository.population import PopulationAdaptor
from variation_query.repository.variation import VariationAdaptor


class VariationDB:
    """A variation database: one engine, adaptors created on demand.

    Usage:
        with VariationDB.from_config(ConnectionConfig(driver="mysql", ...)) as db:
            var = db.get_variation_adaptor().fetch_by_name("rs100")
    """

    def __init__(self, engine: Engine, config: AdaptorConfig | None = None) -> None:
        self.engine = engine
        self.config = config or AdaptorConfig()
        self._population_adaptor: PopulationAdaptor | None = None
        self._variation_adaptor: VariationAdaptor | None = None

    @classmethod
    def from_config(
        cls,
        connection: ConnectionConfig,
        config: AdaptorConfig | None = None,
    ) -> VariationDB:
        config = config or AdaptorConfig()
        engine = Engine.from_config(connection, SQLRegistry(config.sql_dir))
        return cls(engine, config)

    def get_population_adaptor(self) -> PopulationAdaptor:
        if self._population_adaptor is None:
            self._population_adaptor = PopulationAdaptor(self.engine)
        return self._population_adaptor

    def get_variation_adaptor(self) -> VariationAdaptor:
        if self._variation_adaptor is None:
            self._variation_adaptor = VariationAdaptor(
                self.engine, self.get_population_adaptor(), self.config
            )
        return self._variation_adaptor

    def close(self) -> None:
        self.engine.close()

    def __enter__(self) -> VariationDB:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
