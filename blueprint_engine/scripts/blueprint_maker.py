#!/usr/bin/env python3
"""Blueprint maker script.

Usage:
    python -m blueprint_engine.scripts.blueprint_maker
    python -m blueprint_engine.scripts.blueprint_maker --engine creative --pptx
    python -m blueprint_engine.scripts.blueprint_maker --engine project --input brief.json
"""

import argparse
import json
import sys
import time
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from blueprint_engine.config import get_settings
from blueprint_engine.engines.creative.models import CreativeInput
from blueprint_engine.engines.project.models import ProjectInput
from blueprint_engine.exceptions import BlueprintEngineError
from blueprint_engine.models.forms import CreativeForm, ProjectForm
from blueprint_engine.services import export_deck, get_creative_generator, get_project_generator

# 엔진별 출력 파일 접두어
FILE_PREFIXES = {
    "project": "PROJECT",
    "creative": "CREATIVE",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="프로젝트 / 크리에이티브 블루프린트 생성"
    )
    parser.add_argument(
        "--engine",
        choices=sorted(FILE_PREFIXES),
        default="project",
        help="사용할 엔진 (project 또는 creative)"
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="구조화된 입력 JSON 파일 (생략 시 기본 폼 값 사용)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="출력 디렉토리 (기본값: 설정의 output_dir/<engine>)"
    )
    parser.add_argument(
        "--pptx",
        action="store_true",
        help="PPT 덱도 함께 생성"
    )
    return parser


def load_input(engine: str, input_path: str = None):
    """입력 JSON을 로드합니다. 경로가 없으면 기본 폼을 토큰화하여 사용합니다."""
    if input_path is None:
        form = ProjectForm() if engine == "project" else CreativeForm()
        return form.to_input()

    with open(input_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    model = ProjectInput if engine == "project" else CreativeInput
    return model.model_validate(data)


def main(argv: list[str] = None) -> int:
    args = build_parser().parse_args(argv)

    print('\n' + '=' * 70)
    print(f'{args.engine} 블루프린트 생성 시작')
    print(f'시작 시간: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}')
    print('=' * 70)

    try:
        input_doc = load_input(args.engine, args.input)
    except (OSError, json.JSONDecodeError, ValidationError, BlueprintEngineError) as e:
        print(f'입력을 불러올 수 없습니다: {e}')
        return 1

    output_dir = Path(args.output_dir or Path(get_settings().output_dir) / args.engine)
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()
    generator = get_project_generator() if args.engine == "project" else get_creative_generator()
    blueprint = generator.generate(input_doc)
    total_time = time.time() - total_start

    print(f'\n  총 소요시간: {total_time:.3f}초')
    print(f'  권고사항: {len(blueprint.recommendations)}개')

    # 저장
    timestamp = datetime.now().strftime('%Y%m%d-%H%M%S')
    prefix = FILE_PREFIXES[args.engine]

    md_path = output_dir / f'{prefix}-{timestamp}.md'
    md_path.write_text(blueprint.to_markdown(), encoding='utf-8')
    print(f'\nMarkdown 저장: {md_path}')

    json_path = output_dir / f'{prefix}-{timestamp}.json'
    json_path.write_text(blueprint.to_json(), encoding='utf-8')
    print(f'JSON 저장: {json_path}')

    if args.pptx:
        pptx_path = output_dir / f'{prefix}-{timestamp}.pptx'
        try:
            pptx_path.write_bytes(export_deck(blueprint))
        except BlueprintEngineError as e:
            print(f'PPT 생성 실패: {e.message}')
            return 1
        print(f'PPT 저장: {pptx_path}')

    return 0


if __name__ == "__main__":
    sys.exit(main())
