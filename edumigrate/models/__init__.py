from .generated import (  # noqa: F401
    Base,
    ContactMessages,
    Consultations,
    SiteSettings,
    SuccessStories,
    TeamMembers,
    Universities,
)
