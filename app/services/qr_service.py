import base64
import io
import time

import qrcode


def generate_join_token(quiz_id: int, timestamp_ms: int | None = None) -> str:
    """퀴즈 참가 토큰 생성 (quiz-{id}-{epoch millis})"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"quiz-{quiz_id}-{timestamp_ms}"


def build_join_url(origin: str, token: str) -> str:
    """참가자가 QR로 접속할 URL"""
    return f"{origin.rstrip('/')}/quiz/{token}"


def render_qr_data_url(url: str) -> str:
    """URL을 담은 QR 코드를 PNG data URL로 렌더링"""
    image = qrcode.make(url)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"
