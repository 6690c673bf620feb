"""Prompt templates for the agent tasks.

Only the signatures and docstrings matter: they are sent to the model, which
is asked to print what the function would return.
"""

from __future__ import annotations

from .prompting import AIFunction, ai_function


@ai_function
def convert_user_input_to_goal(user_request: str) -> str:
    """Input: user_request takes in a user request.

    Function: Converts user_request into a short, concise goal statement
    describing the website the user wants built.

    Example:
      user_request = "I need a website that lets users login and logout.
      It needs to look fancy and accept payments."
      prints: "build a website that handles users logging in and logging
      out and accepts payments"
    """


@ai_function
def print_project_scope(project_description: str) -> dict:
    """Input: project_description takes in a user request describing a web application.

    Function: Prints a JSON object describing what the project needs.

    Output: a single JSON object with exactly these boolean keys:
      {
        "is_crud_required": bool,
        "is_user_login_and_logout": bool,
        "is_external_urls_required": bool
      }

    Important: only print the JSON object. No markdown, no commentary.
    """


@ai_function
def print_site_urls(project_description: str) -> list:
    """Input: project_description describes a website and its data needs.

    Function: Prints a list of public external API endpoints that the website
    could call to get the data it needs. Only include free endpoints that do
    not require an API key.

    Output: a JSON array of URL strings, e.g.
      ["https://api.binance.com/api/v3/exchangeInfo",
       "https://api.coingecko.com/api/v3/simple/price?ids=bitcoin&vs_currencies=usd"]
    """


@ai_function
def print_backend_webserver_code(project_description_and_template: str) -> str:
    """Input: project_description_and_template holds a project description
    followed by the code of a template web server.

    Function: Rewrites the template web server so that it implements the
    project description. Keep the template's structure; remove any code the
    project does not need.

    Important: only print the code, no explanations and no markdown fences.
    """


@ai_function
def print_rest_api_endpoints(code_input: str) -> str:
    """Input: code_input is the source code of a web server.

    Function: Prints every REST API endpoint the server exposes as a JSON
    array of objects:
      [{"is_route_dynamic": bool, "method": str, "request_body": object,
        "response": object, "route": str}]

    Important: only print the JSON array.
    """


@ai_function
def print_json_value(request: str) -> str:
    """Input: request describes a value.

    Function: Prints exactly the value described by the request, encoded as
    compact JSON.

    Example:
      request = "List two numbers as a JSON array of integers"
      prints: [1,2]
    """


TEMPLATES: dict[str, AIFunction] = {
    t.name: t
    for t in (
        convert_user_input_to_goal,
        print_project_scope,
        print_site_urls,
        print_backend_webserver_code,
        print_rest_api_endpoints,
        print_json_value,
    )
}


def get_template(name: str) -> AIFunction:
    try:
        return TEMPLATES[name]
    except KeyError:
        raise KeyError(f"Unknown prompt template: {name}") from None
