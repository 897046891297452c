"""A keyword-matching customer-support chatbot."""

from __future__ import annotations

from typing import Optional, Sequence

PREFIX = "🤖 Chatbot: "
WELCOME = "Hello! Welcome to ShopEasy Customer Support. How can I help you today?"
GREETING = "Hello! How can I assist you?"
RETURNS = (
    "You can return a product within 7 days from the delivery date. "
    "Please visit our 'Returns' section."
)
DELIVERY = "Delivery usually takes 3 to 5 business days depending on your location."
ACKNOWLEDGE = "Great...!"
CONTACT = "You can contact us at [email] or call [phone]."
FAREWELL = "Thank you for chatting with us! Have a great day! 👋"
UNKNOWN = "I'm sorry, I didn't understand that. Can you please rephrase?"


def respond(message: str) -> str:
    """The chatbot's reply to one message, matched case-insensitively."""
    text = message.lower()
    if text in ("hi", "hello"):
        return GREETING
    if "return" in text:
        return RETURNS
    if "delivery" in text:
        return DELIVERY
    if "ok" in text:
        return ACKNOWLEDGE
    if "contact" in text or "support" in text:
        return CONTACT
    if text in ("bye", "exit"):
        return FAREWELL
    return UNKNOWN


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Chat on standard input until the user says goodbye."""
    print(PREFIX + WELCOME)
    while True:
        try:
            message = input("You: ")
        except EOFError:
            return 0
        reply = respond(message)
        print(PREFIX + reply)
        if reply == FAREWELL:
            return 0