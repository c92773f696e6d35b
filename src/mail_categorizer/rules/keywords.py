"""
Keyword and reply tables for rule-based categorization.

Keywords are matched case-insensitively as substrings of the subject and
body. The lists are fixed; tests depend on their exact contents.
"""

from mail_categorizer.models.enums import Category


CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.INTERESTED: (
        "interested", "tell me more", "sounds good", "learn more",
        "would like to", "interested in", "send me", "demo",
        "want to know", "pricing", "quote", "proposal",
    ),
    Category.MEETING_BOOKED: (
        "calendar", "schedule", "meeting", "appointment",
        "book a", "booked", "meet", "let's meet",
        "calendar invite", "scheduled", "time to talk",
        "confirmed", "accepted invitation",
    ),
    Category.NOT_INTERESTED: (
        "not interested", "no thanks", "unsubscribe", "opt out",
        "remove me", "stop contacting", "don't contact", "no longer",
        "not a fit", "not at this time", "decline", "pass",
    ),
    Category.SPAM: (
        "viagra", "pharmacy", "lottery", "winner", "prince",
        "inheritance", "bank transfer", "prize", "click here",
        "cryptocurrency", "investment opportunity", "bitcoin",
    ),
    Category.OUT_OF_OFFICE: (
        "out of office", "vacation", "holiday", "away from my desk",
        "annual leave", "maternity leave", "paternity leave", "sabbatical",
        "will return", "automatic reply", "auto-reply", "autoreply",
    ),
}


REPLY_TEMPLATES: dict[Category, tuple[str, ...]] = {
    Category.INTERESTED: (
        "Thank you for your interest! I would be happy to provide more information about our product/service.",
        "Great to hear from you! Let me know what specific aspects you would like to learn more about.",
        "Thanks for reaching out. I would love to schedule a call to discuss how we can help you.",
    ),
    Category.MEETING_BOOKED: (
        "I have confirmed our meeting and look forward to speaking with you soon.",
        "Thank you for booking the meeting. I have added it to my calendar and will be prepared.",
        "Looking forward to our upcoming meeting. Please let me know if you need to make any changes.",
    ),
    Category.NOT_INTERESTED: (
        "Thank you for letting me know. I appreciate your consideration.",
        "I understand that this isn't the right fit right now. Would it be okay if I check back in 6 months?",
        "Thank you for your response. Please don't hesitate to reach out if your needs change in the future.",
    ),
    # Spam is never answered; these are notices, not replies to send
    Category.SPAM: (
        "This email has been marked as spam and will not be replied to.",
        "Our system has flagged this message as spam. No action needed.",
        "This message appears to be spam and has been filtered.",
    ),
    Category.OUT_OF_OFFICE: (
        "Thank you for your email. I'll follow up when the recipient returns to the office.",
        "I see this is an out-of-office reply. I'll wait until they return before following up.",
        "Thank you for letting me know you're away. I'll reach out when you return.",
    ),
}
