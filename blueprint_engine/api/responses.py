"""
블루프린트 내보내기 응답 헬퍼입니다.
markdown / json / pptx 형식의 첨부 파일 응답을 만듭니다.
"""

import logging
from typing import Union

from fastapi.responses import Response

from blueprint_engine.engines.creative.models import CreativeBlueprint
from blueprint_engine.engines.project.models import ProjectBlueprint
from blueprint_engine.exceptions import UnsupportedFormatError
from blueprint_engine.services import export_deck

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("markdown", "json", "pptx")

PPTX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


def attachment(content: Union[str, bytes], media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"'
        }
    )


def export_response(
    blueprint: Union[ProjectBlueprint, CreativeBlueprint],
    format: str,
    filename: str,
    title: str,
) -> Response:
    """
    블루프린트를 파일로 다운로드하는 응답을 만듭니다.

    지원하는 형식:
    - markdown: 마크다운 텍스트 파일 (.md)
    - json: camelCase JSON 파일 (.json)
    - pptx: 다크 테마 PPT 덱 (.pptx)

    Raises:
        UnsupportedFormatError: 지원하지 않는 형식
    """
    logger.info(f"블루프린트 내보내기: {filename} ({format})")

    if format == "markdown":
        return attachment(blueprint.to_markdown(title), "text/markdown", f"{filename}.md")
    elif format == "json":
        return attachment(blueprint.to_json(), "application/json", f"{filename}.json")
    elif format == "pptx":
        return attachment(export_deck(blueprint, title), PPTX_MEDIA_TYPE, f"{filename}.pptx")
    else:
        raise UnsupportedFormatError(
            f"지원하지 않는 형식입니다: {format}",
            details={"format": format, "supported": list(SUPPORTED_FORMATS)},
        )
