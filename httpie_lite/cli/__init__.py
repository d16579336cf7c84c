"""
CLI Client Module.

Command-line HTTP client built with Click.

Architecture:
- arguments: key=value and URL parsing, exposed as click parameter types
- request: GetRequest / PostRequest descriptors
- client: sends one descriptor over httpx
- render: prints status, headers and body
- main: the click group wiring it together

Usage:
    httpie-lite get https://httpbin.org/get
    httpie-lite post https://httpbin.org/post name=world
"""
