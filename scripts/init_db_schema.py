"""
데이터베이스 스키마 초기화 스크립트
----------------------------------
human 테이블을 생성하고, 필요하면 이름 목록으로 초기 데이터를 넣습니다.

    python scripts/init_db_schema.py --seed Ada Linus
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# 환경 변수 로드
from dotenv import load_dotenv

# backend 폴더의 .env 파일 로드
BACKEND_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(BACKEND_ROOT / ".env")

# backend 모듈 import를 위해 경로 추가
sys.path.insert(0, str(BACKEND_ROOT))

from sqlalchemy.engine import Engine

from app.core.config import get_settings, load_connection
from app.db.init_db import init_db
from app.db.session import create_db_engine, create_session_factory
from app.db.startup import wait_for_database
from app.models.human import Human
from app.services.greeting import HumanRepository


def seed_humans(engine: Engine, names: list[str]) -> list[Human]:
    """Insert humans whose name is not stored yet; return the new rows."""
    created: list[Human] = []
    session_factory = create_session_factory(engine)
    with session_factory() as db:
        repo = HumanRepository(db)
        for name in dict.fromkeys(names):
            if repo.find_by_name(name):
                continue
            human = Human(name=name)
            db.add(human)
            created.append(human)
        db.commit()
        for human in created:
            db.refresh(human)
            db.expunge(human)
    return created


def init_db_schema(names: list[str]) -> None:
    """데이터베이스 스키마 초기화."""
    settings = get_settings()
    engine = create_db_engine(load_connection(settings).url())
    wait_for_database(engine, settings.startup_timeout, settings.startup_interval)

    print("🔧 데이터베이스 스키마 초기화 중...")
    init_db(engine)
    print("✅ 테이블 생성 완료")

    for human in seed_humans(engine, names):
        print(f"  + {human!r}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the human table and seed names.")
    parser.add_argument("--seed", nargs="*", default=[], metavar="NAME", help="names to insert")
    args = parser.parse_args()
    init_db_schema(args.seed)


if __name__ == "__main__":
    main()
