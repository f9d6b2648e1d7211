"""
데이터 소스 추상화 계층

이 모듈은 CSV/Excel 파일로부터 라인 데이터를 로드하는 기능을 제공합니다.
Streamlit 세션 헬퍼는 data_sources.session에서 직접 임포트합니다.
"""

from .files import read_line_csv, read_line_excel, read_line_file
from .loader import FileLoader, Loader, StaticFrameLoader

__all__ = [
    # 로더 프로토콜
    "Loader",
    "StaticFrameLoader",
    "FileLoader",
    # 파일 리더
    "read_line_csv",
    "read_line_excel",
    "read_line_file",
]
