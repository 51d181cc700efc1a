"""Site metadata for slinkydeveloper.com."""

from .models import SiteMetadata

SITE_METADATA = {
    "title": "slinkydeveloper",
    "url": "https://slinkydeveloper.com/",
    "language": "en",
    "description": "Developer experience, distributed systems, and other fairy tales.",
    "author": {
        "name": "Francesco Guardiani",
        "email": "me@slinkydeveloper.com",
        "url": "https://slinkydeveloper.com/about-me/"
    },
    "social": {
        "github": "https://github.com/slinkydeveloper",
        "bluesky": "https://bsky.app/profile/slinkydeveloper.bsky.social",
        "x": "https://x.com/slinkydeveloper",
        "linkedin": "https://www.linkedin.com/in/francesco-guardiani/"
    }
}

METADATA = SiteMetadata.from_dict(SITE_METADATA)
