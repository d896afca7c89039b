# app/chat_proxy/chat_service.py
import logging

from app.chat_proxy.groq_chat_client import GroqChatClient
from app.shared.exceptions import BadRequestError

logger = logging.getLogger(__name__)

# Answered locally with the canned diagnosis history
MOCK_PATIENT_PROMPT = "get patient data"

# Returned verbatim for the mock prompt, whitespace included
MOCK_PATIENT_HISTORY_HTML = """
      <div>
        <h2>Patient Diagnosis History:</h2>
        <ul>
          <li>
            <strong>Headache</strong><br>
            <strong>Date:</strong> 2024-07-01<br>
            <strong>Diagnosis:</strong> Headache<br>
            <strong>Treatment:</strong> Pain relief medication
          </li>
          <li>
            <strong>Broken Leg</strong><br>
            <strong>Date:</strong> 2024-06-15<br>
            <strong>Diagnosis:</strong> Fractured femur<br>
            <strong>Treatment:</strong> Cast and rest
          </li>
          <li>
            <strong>Flu</strong><br>
            <strong>Date:</strong> 2024-05-20<br>
            <strong>Diagnosis:</strong> Influenza<br>
            <strong>Treatment:</strong> Rest, fluids, and antiviral medication
          </li>
        </ul>
      </div>
    """


def answer_prompt(prompt, client: GroqChatClient) -> str:
    """
    Answer a chat prompt.

    Empty prompts are rejected before any external call. The mock prompt is
    answered locally; everything else goes to Groq.
    """
    if not prompt:
        raise BadRequestError("Missing prompt in request body")

    if prompt == MOCK_PATIENT_PROMPT:
        logger.info("📋 Serving mock patient diagnosis history")
        return MOCK_PATIENT_HISTORY_HTML

    if not isinstance(prompt, str):
        prompt = str(prompt)
    return client.complete(prompt)
