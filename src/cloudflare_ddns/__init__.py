"""Keep Cloudflare "A" records pointed at the current public IPv4 address."""

__version__ = "0.1.0"
