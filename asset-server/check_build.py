"""
检查 WebGL 构建在对象存储中是否完整

对加载器会请求的四个文件（.loader.js / .data / .framework.js / .wasm）逐一解析，
输出实际命中的对象路径以及是否为 .gz 压缩版本。

示例：
    python check_build.py demo Build/app
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from app.core.config import get_settings
from app.core.container import ApplicationContainer
from app.core.logging_config import configure_logging
from app.modules.assets import AssetError, AssetResolver
from app.schemas import BuildFileInfo, BuildReport


def build_report(resolver: AssetResolver, container_id: str, build_id: str) -> BuildReport:
    files = []
    for status in resolver.inspect_build(container_id, build_id):
        resolution = status.resolution
        files.append(
            BuildFileInfo(
                logical_path=status.logical_path,
                found=status.found,
                physical_path=resolution.physical_path if resolution else None,
                compressed=resolution.is_compressed if resolution else False,
            )
        )
    return BuildReport(
        container_id=container_id,
        build_id=build_id,
        complete=all(item.found for item in files),
        files=files,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check that a WebGL build is fully published")
    parser.add_argument("container", help="Container id (bucket / directory name)")
    parser.add_argument("build", help="Build id, e.g. Build/app for Build/app.wasm")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)
    container = ApplicationContainer.from_settings(settings)

    try:
        report = build_report(container.resolver, args.container, args.build)
    except AssetError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        for item in report.files:
            if not item.found:
                print(f"[missing] {item.logical_path}")
            elif item.compressed:
                print(f"[ok] {item.logical_path} -> {item.physical_path} (gzip)")
            else:
                print(f"[ok] {item.logical_path}")
    return 0 if report.complete else 1


if __name__ == "__main__":
    sys.exit(main())
