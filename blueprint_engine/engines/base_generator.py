"""Base generator class for all blueprint generators.

이 모듈은 프로젝트/크리에이티브 블루프린트 생성기가 공통으로 사용하는
기본 기능을 제공하는 추상 베이스 클래스를 정의합니다.

주요 기능:
- 템플릿 메서드 패턴을 통한 일관된 생성 흐름
- 로깅 및 에러 처리 표준화

생성기는 상태를 갖지 않으므로 하나의 인스턴스를 여러 요청에서 공유해도 안전합니다.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TypeVar, Generic

from blueprint_engine.exceptions import GenerationError

# 제네릭 타입 변수
InputT = TypeVar('InputT')      # 입력 레코드 타입 (ProjectInput 등)
OutputT = TypeVar('OutputT')    # 출력 블루프린트 타입 (ProjectBlueprint 등)

logger = logging.getLogger(__name__)


class BaseGenerator(ABC, Generic[InputT, OutputT]):
    """
    블루프린트 생성기 추상 베이스 클래스.

    Template Method 패턴을 사용하여 일관된 생성 흐름을 보장합니다:
    1. 시작 로깅
    2. _do_generate() 호출 (서브클래스 구현)
    3. 완료 로깅

    Attributes:
        _generator_name: 로깅에 사용되는 생성기 이름

    Example:
        class MyGenerator(BaseGenerator[MyInput, MyBlueprint]):
            _generator_name = "MyGenerator"

            def _do_generate(self, input_doc):
                return MyBlueprint(...)
    """

    # 서브클래스에서 오버라이드해야 하는 클래스 속성
    _generator_name: str = "BaseGenerator"

    def generate(self, input_doc: InputT) -> OutputT:
        """
        블루프린트 생성 템플릿 메서드.

        같은 입력에는 항상 같은 블루프린트를 반환합니다.
        호출할 때마다 새 블루프린트 전체를 만들며 이전 결과를 참조하지 않습니다.

        Args:
            input_doc: 입력 레코드

        Returns:
            생성된 블루프린트

        Raises:
            GenerationError: 파생 규칙에서 예기치 않은 예외가 발생한 경우
        """
        logger.info(f"[{self._generator_name}] 생성 시작")
        start_time = datetime.now()

        try:
            result = self._do_generate(input_doc)
        except Exception as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(f"[{self._generator_name}] 생성 실패 ({elapsed:.3f}초): {e}")
            raise GenerationError(
                f"{self._generator_name} 블루프린트 생성 실패",
                details={"reason": str(e)},
            ) from e

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[{self._generator_name}] 생성 완료: {elapsed:.3f}초")
        return result

    @abstractmethod
    def _do_generate(self, input_doc: InputT) -> OutputT:
        """
        실제 블루프린트 생성 로직 (서브클래스에서 구현).

        Args:
            input_doc: 입력 레코드

        Returns:
            생성된 블루프린트
        """
        pass
