#!/usr/bin/env python3
"""Example showing how a host wires vfs-editor into an agent loop."""

import json

from vfs_editor import AgentSession


class ScriptedAgent:
    """Stand-in for an LLM that replays a fixed list of tool calls."""

    def __init__(self, tool_calls: list[dict]):
        self.tool_calls = tool_calls

    def next_call(self):
        if not self.tool_calls:
            return None
        return self.tool_calls.pop(0)


def handle_request(snapshot: dict, agent: ScriptedAgent) -> tuple[dict, list[dict]]:
    """Run one request: restore the snapshot, apply tool calls, return new state."""
    session = AgentSession(snapshot)

    while True:
        call = agent.next_call()
        if call is None:
            break
        result = session.execute(call["name"], call["input"])
        # The agent sees the message text either way
        print(f"{call['name']}.{call['input'].get('command')}: {result.message}")

    return session.snapshot(), session.get_operation_log()


def demonstrate_agent_usage():
    print("=== Agent Integration Demo ===\n")

    print("Tool definitions offered to the model:")
    print(json.dumps(AgentSession().tool_definitions(), indent=2)[:400] + "...\n")

    agent = ScriptedAgent(
        [
            {
                "name": "str_replace_editor",
                "input": {
                    "command": "create",
                    "path": "/App.jsx",
                    "file_text": "export default function App() {\n  return <h1>Hello</h1>;\n}",
                },
            },
            {
                "name": "str_replace_editor",
                "input": {
                    "command": "str_replace",
                    "path": "/App.jsx",
                    "old_str": "Hello",
                    "new_str": "Hello, world",
                },
            },
            {
                "name": "str_replace_editor",
                "input": {"command": "insert", "path": "/App.jsx", "insert_line": 99},
            },
            {
                "name": "file_manager",
                "input": {"command": "rename", "path": "/App.jsx", "new_path": "/src/App.jsx"},
            },
            {"name": "file_manager", "input": {"command": "delete", "path": "/"}},
            {"name": "str_replace_editor", "input": {"command": "view", "path": "/src/App.jsx"}},
        ]
    )

    snapshot, log = handle_request({}, agent)

    print("\nNew snapshot:")
    print(json.dumps(snapshot, indent=2))

    failures = [entry for entry in log if not entry["success"]]
    print(f"\n{len(log)} tool call(s), {len(failures)} failure(s)")

    print("\n=== Demo completed successfully! ===")


if __name__ == "__main__":
    demonstrate_agent_usage()
