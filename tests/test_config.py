"""Unit tests for EndpointConfig."""

import tempfile
from pathlib import Path

from behat_endpoint.config import EndpointConfig
from behat_endpoint.store import MemoryBackend, SqliteBackend


class TestEndpointConfig:
    """Tests for loading config and building collaborators."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A config path that does not exist yields defaults."""
        config = EndpointConfig.from_yaml(tmp_path / "absent.yaml")
        assert config.backend == "sqlite"
        assert config.database == Path("behat_endpoint.db")
        assert config.entity_types == {}

    def test_from_yaml(self) -> None:
        """from_yaml loads backend, fields and users."""
        yaml_content = """
backend: memory
entity_types:
  node:
    fields:
      field_tags:
        type: entity_reference
        settings: {target_type: taxonomy_term}
users: [admin, editor]
"""
        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as f:
            Path(f.name).write_text(yaml_content)
            config = EndpointConfig.from_yaml(f.name)
            Path(f.name).unlink()
        assert config.backend == "memory"
        assert config.users == ["admin", "editor"]
        schema = config.build_schema()
        assert schema.field_types("node") == {"field_tags": "entity_reference"}

    def test_build_memory_storage_seeds_users(self) -> None:
        """Configured users exist in the built storage."""
        storage = EndpointConfig(backend="memory", users=["editor"]).build_storage()
        assert isinstance(storage, MemoryBackend)
        assert storage.find_user_by_name("editor") is not None

    def test_build_sqlite_storage_database_override(self, tmp_path: Path) -> None:
        """An explicit database path wins over the configured one."""
        db_path = tmp_path / "override.db"
        storage = EndpointConfig(database=tmp_path / "configured.db").build_storage(db_path)
        assert isinstance(storage, SqliteBackend)
        assert db_path.exists()
        assert not (tmp_path / "configured.db").exists()
