# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for Config loading, env overrides and property binding."""

from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from pybean.config.properties import ContainerProperties
from pybean.core.config import Config, config_properties


@config_properties(prefix="myapp.pool")
class PoolProperties(BaseModel):
    size: int = Field(default=5, ge=1)
    name: str = "default"


class Undecorated(BaseModel):
    value: str = "nope"


class TestConfig:
    def test_get_top_level_value(self):
        config = Config({"app": {"port": 8080}})
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_through_scalar_returns_default(self):
        config = Config({"app": "scalar"})
        assert config.get("app.name", "x") == "x"

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "pybean.yaml"
        config_file.write_text("pybean:\n  container:\n    parallel: true\n")
        config = Config.from_file(config_file)
        assert config.get("pybean.container.parallel") is True
        assert config.loaded_sources == [str(config_file)]

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "pybean.toml"
        config_file.write_text('[pybean.container]\nscan-package = "myapp"\n')
        config = Config.from_file(config_file)
        assert config.get("pybean.container.scan-package") == "myapp"

    def test_missing_file_gives_empty_config(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_profile_overlay(self, tmp_path: Path):
        (tmp_path / "pybean.yaml").write_text("app:\n  name: base\n  port: 8080\n")
        (tmp_path / "pybean-dev.yaml").write_text("app:\n  port: 9090\n")
        config = Config.from_file(tmp_path / "pybean.yaml", active_profiles=["dev", "absent"])
        assert config.get("app.name") == "base"
        assert config.get("app.port") == 9090
        assert len(config.loaded_sources) == 2

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PYBEAN_CONTAINER_SCAN_PACKAGE", "from_env")
        config = Config({"pybean": {"container": {"scan-package": "from_file"}}})
        assert config.get("pybean.container.scan-package") == "from_env"

    def test_env_override_applies_to_section(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PYBEAN_CONTAINER_PARALLEL", "true")
        config = Config({"pybean": {"container": {"parallel": False}}})
        assert config.get_section("pybean.container") == {"parallel": "true"}

    def test_placeholder_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ROOT_PKG", "shop")
        config = Config({"pybean": {"container": {"scan-package": "${ROOT_PKG}.app"}}})
        assert config.get("pybean.container.scan-package") == "shop.app"

    def test_placeholder_from_config_and_default(self):
        config = Config({"base": "shop", "pkg": "${base}.app", "other": "${nope.key:fallback}"})
        assert config.get("pkg") == "shop.app"
        assert config.get("other") == "fallback"

    def test_unresolvable_placeholder(self):
        config = Config({"pkg": "${nope.key}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("pkg")

    def test_circular_placeholder(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestBind:
    def test_bind_values(self):
        config = Config({"myapp": {"pool": {"size": 10, "name": "main"}}})
        props = config.bind(PoolProperties)
        assert props.size == 10
        assert props.name == "main"

    def test_bind_defaults(self):
        props = Config({}).bind(PoolProperties)
        assert props.size == 5

    def test_bind_validation_error(self):
        config = Config({"myapp": {"pool": {"size": 0}}})
        with pytest.raises(ValueError, match="Configuration validation failed for 'PoolProperties'"):
            config.bind(PoolProperties)

    def test_bind_undecorated(self):
        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Undecorated)


class TestContainerProperties:
    def test_defaults(self):
        props = Config({}).bind(ContainerProperties)
        assert props.parallel is False
        assert props.max_workers is None
        assert props.role_markers == ["service", "repository"]
        assert props.scan_package is None

    def test_kebab_case_keys(self):
        config = Config(
            {
                "pybean": {
                    "container": {
                        "parallel": True,
                        "max-workers": 4,
                        "role-markers": ["component"],
                        "scan-package": "shop",
                    }
                }
            }
        )
        props = config.bind(ContainerProperties)
        assert props.parallel is True
        assert props.max_workers == 4
        assert props.role_markers == ["component"]
        assert props.scan_package == "shop"

    def test_comma_separated_markers(self):
        config = Config({"pybean": {"container": {"role-markers": "service, component"}}})
        props = config.bind(ContainerProperties)
        assert props.role_markers == ["service", "component"]
        assert {m.__name__ for m in props.stereotypes()} == {"service", "component"}

    def test_unknown_marker_rejected(self):
        config = Config({"pybean": {"container": {"role-markers": ["controller"]}}})
        with pytest.raises(ValueError, match="unknown stereotypes"):
            config.bind(ContainerProperties)

    def test_invalid_max_workers(self):
        config = Config({"pybean": {"container": {"max-workers": 0}}})
        with pytest.raises(ValueError):
            config.bind(ContainerProperties)

    def test_env_string_coerced(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PYBEAN_CONTAINER_MAX_WORKERS", "8")
        config = Config({"pybean": {"container": {"max-workers": 2}}})
        assert config.bind(ContainerProperties).max_workers == 8
