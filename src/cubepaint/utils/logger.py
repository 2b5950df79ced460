import os
import json
from datetime import datetime
from typing import Any, Dict


class SessionLogger:
    def __init__(self, log_dir: str, session_name: str):
        """
        Initializes the logger for a play session.

        Args:
            log_dir (str): The base directory for logs.
            session_name (str): A name for the session.
        """
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.session_name = f"{session_name}_{self.timestamp}"
        self.run_dir = os.path.join(log_dir, self.session_name)
        self.logs = []

        os.makedirs(self.run_dir, exist_ok=True)

    def log_step(self, step: int, data: Dict[str, Any], verbose: bool = True):
        """
        Logs a single step of the session.

        Args:
            step (int): The move counter after the step.
            data (Dict[str, Any]): A dictionary of data to log for the step.
            verbose (bool): Whether to print step information to console.
        """
        log_entry = {"step": step, "timestamp": datetime.now().isoformat(), **data}

        if verbose:
            step_type = data.get("step_type", "unknown")
            if step_type == "initial":
                print(f"🚀 Step {step}: New {data.get('side', '?')}x{data.get('side', '?')} puzzle")
            elif step_type == "move":
                print(f"⚡ Step {step}: Rolled to {tuple(data.get('target', ()))}")
            elif step_type == "rejected":
                print(f"❌ Step {step}: Move to {tuple(data.get('target', ()))} rejected")
                print(f"  🔍 Details: {data.get('error', 'Unknown error')}")
            elif step_type == "solved":
                print(f"🎉 Step {step}: All faces painted")

        self.logs.append(log_entry)

    def save_logs(self):
        """Saves all collected logs to a JSON file."""
        log_file = os.path.join(self.run_dir, "session_log.json")
        with open(log_file, "w") as f:
            json.dump(self.logs, f, indent=2, default=str)

        summary_file = os.path.join(self.run_dir, "summary.txt")
        self._create_summary_file(summary_file)

        print(f"📁 Logs saved to: {log_file}")
        print(f"📋 Summary saved to: {summary_file}")
        return log_file

    def _create_summary_file(self, summary_file: str):
        """Create a human-readable summary file."""
        puzzles = len([log for log in self.logs if log.get("step_type") == "initial"])
        moves = len([log for log in self.logs if log.get("step_type") == "move"])
        rejected = len([log for log in self.logs if log.get("step_type") == "rejected"])
        solved = len([log for log in self.logs if log.get("step_type") == "solved"])

        with open(summary_file, "w") as f:
            f.write(f"Session Summary: {self.session_name}\n")
            f.write("=" * 60 + "\n")
            f.write(f"Puzzles Started: {puzzles}\n")
            f.write(f"Moves Made: {moves}\n")
            f.write(f"Moves Rejected: {rejected}\n")
            f.write(f"Puzzles Solved: {solved}\n")
            f.write("\nStep-by-step breakdown:\n")
            f.write("-" * 30 + "\n")

            for log in self.logs:
                step = log.get("step", "?")
                step_type = log.get("step_type", "unknown")

                if step_type == "initial":
                    f.write(f"Step {step}: New puzzle (side {log.get('side', '?')}, seed {log.get('seed')})\n")
                elif step_type == "move":
                    f.write(f"Step {step}: Roll to {tuple(log.get('target', ()))}\n")
                elif step_type == "rejected":
                    f.write(f"Step {step}: REJECTED {tuple(log.get('target', ()))} - {log.get('error', 'Unknown')}\n")
                elif step_type == "solved":
                    f.write(f"Step {step}: SOLVED\n")
