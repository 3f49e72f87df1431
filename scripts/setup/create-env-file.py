#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""로컬 개발용 .env 파일 생성"""
import os
from pathlib import Path

# 프로젝트 루트
project_root = Path(__file__).parent.parent.parent
env_file = project_root / ".env"

# 로컬 개발 기본값 (운영 DB 정보는 서버 담당자로부터 받아서 수동으로 입력)
env_content = """# Database
# 로컬: SQLite 파일 / 운영: postgresql+asyncpg://<DB_USER>:<DB_PASSWORD>@<HOST>:5432/quiz_arena_db
DATABASE_URL=sqlite+aiosqlite:///./quiz_arena.db
AUTO_CREATE_TABLES=true

# CORS
ALLOWED_ORIGINS=http://localhost:5173

# QR 참가 링크에 사용할 외부 주소 (비워두면 요청 주소 사용)
PUBLIC_ORIGIN=

# 리더보드 폴링 간격 (초)
LEADERBOARD_POLL_INTERVAL_SECONDS=5

# Environment
# 로컬 개발 시 development로 두면 상세 에러 메시지 확인 가능
ENVIRONMENT=development
LOG_DIR=./logs
PORT=8000
"""

def create_env_file():
    """.env 파일 생성 (UTF-8, BOM 없음)"""
    print(f"[INFO] .env 파일 생성 중: {env_file}")
    
    # 기존 파일이 있으면 백업
    if env_file.exists():
        backup_file = project_root / ".env.backup"
        print(f"[INFO] 기존 .env 파일 백업: {backup_file}")
        with open(env_file, 'r', encoding='utf-8') as f:
            backup_content = f.read()
        with open(backup_file, 'w', encoding='utf-8', newline='\n') as f:
            f.write(backup_content)
    
    # .env 파일 생성 (UTF-8, BOM 없음, LF 줄바꿈)
    with open(env_file, 'w', encoding='utf-8', newline='\n') as f:
        f.write(env_content)
    
    print(f"[OK] .env 파일 생성 완료")
    print(f"[INFO] 파일 위치: {env_file}")
    
    # 파일 권한 확인 (Windows에서는 chmod가 없으므로 스킵)
    if os.name != 'nt':
        os.chmod(env_file, 0o600)
        print(f"[INFO] 파일 권한 설정: 600")


if __name__ == "__main__":
    try:
        create_env_file()
        print("\n[OK] 작업 완료")
    except Exception as e:
        print(f"\n[ERROR] 에러 발생: {e.__class__.__name__}: {str(e)}")
        import traceback
        traceback.print_exc()
        exit(1)
