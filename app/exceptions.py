"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""
    
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class QuizNotFoundError(BaseAppError):
    """퀴즈를 찾을 수 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, quiz_id: int):
        super().__init__(f"퀴즈를 찾을 수 없습니다: {quiz_id}", status_code=404)


class QuizQrCodeNotFoundError(BaseAppError):
    """QR 코드에 해당하는 퀴즈가 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, qr_code: str):
        super().__init__(f"QR 코드에 해당하는 퀴즈를 찾을 수 없습니다: {qr_code}", status_code=404)


class QuestionNotFoundError(BaseAppError):
    """문제를 찾을 수 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, question_id: int):
        super().__init__(f"문제를 찾을 수 없습니다: {question_id}", status_code=404)


class ParticipantNotFoundError(BaseAppError):
    """참가자를 찾을 수 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, participant_id: int):
        super().__init__(f"참가자를 찾을 수 없습니다: {participant_id}", status_code=404)


class SubmissionNotFoundError(BaseAppError):
    """제출 기록을 찾을 수 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, participant_id: int):
        super().__init__(f"제출 기록을 찾을 수 없습니다: participant_id={participant_id}", status_code=404)


class DuplicateParticipantError(BaseAppError):
    """같은 퀴즈에 같은 이메일로 중복 등록할 때 발생하는 예외 (400)"""
    
    def __init__(self, email: str, quiz_id: int):
        super().__init__(f"이미 이 퀴즈에 등록된 참가자입니다: email={email}, quiz_id={quiz_id}", status_code=400)


class InvalidSubmissionError(BaseAppError):
    """잘못된 답안 제출 요청일 때 발생하는 예외 (400)"""
    
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class QrCodeGenerationError(BaseAppError):
    """QR 코드 이미지 생성 실패 (500)"""
    
    def __init__(self, message: str = "QR 코드 생성에 실패했습니다"):
        super().__init__(message, status_code=500)


class InvalidQuestionError(BaseAppError):
    """잘못된 문제 생성/수정 요청일 때 발생하는 예외 (400)"""
    
    def __init__(self, message: str):
        super().__init__(message, status_code=400)
