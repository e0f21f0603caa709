#!/usr/bin/env python3
"""
CLI for the LLM chat proxy.

Usage:
    llm-chat-proxy start
    llm-chat-proxy chat "Hello" --provider openai --api-key sk-...
"""

import json
import logging

import click

from .models import LLMProvider, ProxyConfig


@click.group()
def cli():
    """LLM Chat Proxy - one endpoint for OpenAI, Anthropic and Google chat APIs"""
    pass


@cli.command('start')
@click.option('--host', help='Host to bind to [env: LLM_PROXY_HOST, default: 0.0.0.0]')
@click.option('--port', type=int, help='Port to bind to [env: LLM_PROXY_PORT, default: 8000]')
@click.option('--reload', is_flag=True, help='Enable auto-reload for development')
@click.option('--log-level', type=click.Choice(['debug', 'info', 'warning', 'error']),
              help='Log level [env: LLM_PROXY_LOG_LEVEL, default: info]')
def start(host, port, reload, log_level):
    """Start the LLM chat proxy server.

    CLI flags override env vars, which override the built-in defaults.

    Examples:

    \b
      # Start with defaults
      llm-chat-proxy start
      # Custom port, debug logging
      llm-chat-proxy start --port 8080 --log-level debug
    """
    import uvicorn

    config = ProxyConfig.from_env()
    if host is not None:
        config.host = host
    if port is not None:
        config.port = port
    if log_level is not None:
        config.log_level = log_level

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    click.echo(f"Starting LLM chat proxy on {config.host}:{config.port}...")
    click.echo("Press Ctrl+C to stop.\n")

    uvicorn.run(
        "llm_chat_proxy.api:app",
        host=config.host,
        port=config.port,
        reload=reload,
        log_level=config.log_level,
    )


@cli.command('chat')
@click.argument('message')
@click.option('--provider', required=True, type=click.Choice([p.value for p in LLMProvider]))
@click.option('--api-key', envvar='LLM_PROXY_API_KEY', required=True, help='Provider API key [env: LLM_PROXY_API_KEY]')
@click.option('--model', help='Model name (provider default if omitted)')
@click.option('--system', help='Optional system prompt')
@click.option('--proxy', default='http://localhost:8000', help='LLM proxy server URL')
def chat(message, provider, api_key, model, system, proxy):
    """Send a one-shot chat message through a running proxy.

    Examples:

    \b
      llm-chat-proxy chat "Hello" --provider anthropic --system "Be brief."
      llm-chat-proxy chat "Hello" --provider google --model gemini-pro
    """
    import requests

    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": message})

    body = {"messages": messages, "provider": provider, "apiKey": api_key}
    if model:
        body["model"] = model

    try:
        resp = requests.post(proxy, json=body)
    except requests.exceptions.ConnectionError:
        click.echo(f'Error: Cannot connect to proxy at {proxy}', err=True)
        click.echo('Is the proxy server running?', err=True)
        raise SystemExit(1)

    try:
        data = resp.json()
    except ValueError:
        data = {"error": resp.text}

    if resp.status_code != 200:
        error = data.get("error", data) if isinstance(data, dict) else data
        click.echo(f'Error ({resp.status_code}): {error}', err=True)
        raise SystemExit(1)

    click.echo(json.dumps(data, indent=2))


if __name__ == '__main__':
    cli()
