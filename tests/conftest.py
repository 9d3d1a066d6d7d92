import json
from pathlib import Path

import pytest


@pytest.fixture
def write_repo(tmp_path):
    """Create files under ``tmp_path``; dict values are dumped as JSON."""

    def _write(files):
        for name, content in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            if not isinstance(content, str):
                content = json.dumps(content)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


HEALTHY_TSCONFIG = {
    "compilerOptions": {
        "strict": True,
        "noUncheckedIndexedAccess": True,
        "exactOptionalPropertyTypes": True,
    }
}

HEALTHY_PACKAGE_JSON = {
    "scripts": {"lint": "eslint ."},
    "devDependencies": {"eslint": "^8.0.0"},
}


@pytest.fixture
def healthy_repo(write_repo) -> Path:
    return write_repo(
        {
            "tsconfig.json": HEALTHY_TSCONFIG,
            "package.json": HEALTHY_PACKAGE_JSON,
            "eslint.config.js": "export default [];",
        }
    )
