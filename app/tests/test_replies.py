from app.domain.enums import ChatStatus
from app.domain.models import ProcessResult
from app.services import replies
from app.services.replies import select_reply


def test_select_reply_by_status():
    assert select_reply(ProcessResult(None, ChatStatus.AWAITING_BARBER, True)) == replies.GREETING_NEW
    assert select_reply(ProcessResult(None, ChatStatus.AWAITING_BARBER, False)) == replies.AWAITING_BARBER
    assert select_reply(ProcessResult(None, ChatStatus.ATTENDED, False)) == replies.WELCOME_BACK
    assert select_reply(ProcessResult(None, ChatStatus.NEW, True)) == replies.FALLBACK_GREETING
