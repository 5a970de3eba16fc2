GREETING = (
    "Hi! I'm your coaching assistant. I can help you learn about our services "
    "and book a meeting with our coaches. How can I assist you today?"
)

GOALS_QUESTION = (
    "That's great to hear! Before we schedule a meeting, I'd love to learn more "
    "about you. What are your main goals that you'd like to work on with a coach?"
)

EXPERIENCE_QUESTION = (
    "Thank you for sharing that! Have you worked with a coach before, or would "
    "this be your first coaching experience?"
)

TIMEFRAME_QUESTION = (
    "Perfect! One more question - when are you looking to get started? Are you "
    "ready to begin soon or are you planning for the future?"
)

CLOSING_QUESTION = (
    "Excellent! Based on what you've shared, I think our coaching program would "
    "be a great fit for you. Would you like me to help you schedule a "
    "consultation with one of our expert coaches?"
)

BOOKING_FORM_PROMPT = (
    "Perfect! I'd be happy to help you schedule a consultation. Please provide "
    "your name and email address, and I'll set up a meeting for you."
)

CHAT_FALLBACK = (
    "I apologize, but I'm having trouble connecting right now. You can still book "
    "a meeting by providing your name and email, or try contacting us directly."
)

BOOKING_FAILED = (
    "I apologize, but there was an issue with booking your meeting. Please try "
    "again or contact us directly."
)


def booking_confirmed(backend_message: str | None) -> str:
    parts = ["Great! I've initiated your meeting booking process."]
    if backend_message and backend_message.strip():
        parts.append(backend_message.strip())
    parts.append("You'll receive an email with the booking link shortly.")
    return " ".join(parts)
