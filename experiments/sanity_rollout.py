# /experiments/sanity_rollout.py
"""
Sanity rollouts for JumperEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds
- Writes an episodes CSV for notebook analysis
- Optionally saves per-episode action sequences (.npy) for later inspection

Usage examples (from repo root):
  # Both policies over 20 default seeds, frame_skip=4:
  python -m experiments.sanity_rollout --policies both

  # Only heuristic, custom seeds, keep action traces:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333 --save-traces
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Tuple

import numpy as np

from src.env.jumper_env import JumperEnv
from src.game.config import FPS


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.randint(0, 4))
    return act

def tiny_heuristic_policy_init(dead_zone: float = 0.02):
    """
    Steer toward the platform whose top is closest to the player's feet
    (first observation slot). Idle when roughly centered or when no platform.
    """
    def act(obs: np.ndarray) -> int:
        dx0, present0 = obs[3], obs[5]
        if present0 < 0.5 or abs(dx0) < dead_zone:
            return 0
        return 2 if dx0 > 0 else 1
    return act


# ------------------------ Rollout core ------------------------

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    save_traces: bool,
                    out_dir: Path) -> Tuple[int, float, int, bool, bool, int]:
    """
    Returns: (ep_len, ret_sum, best_score, terminated, truncated, bounces)
    """
    env = JumperEnv(frame_skip=frame_skip)

    if policy_name == "random":
        policy = random_policy_init(10_000 + seed)
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError(f"Unknown policy: {policy_name}")

    actions: List[int] = []
    ret_sum = 0.0
    bounces = 0
    ep_len = 0
    term = trunc = False
    info = {}

    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            a = policy(obs)
            actions.append(int(a))
            obs, r, term, trunc, info = env.step(a)
            ret_sum += float(r)
            ep_len += 1
            bounces += int(info.get("bounces", 0))
            if term or trunc:
                break
    finally:
        env.close()

    if save_traces:
        trace_dir = out_dir / "traces" / policy_name
        trace_dir.mkdir(parents=True, exist_ok=True)
        np.save(trace_dir / f"{seed}_actions.npy", np.asarray(actions, dtype=np.int8))

    return ep_len, ret_sum, int(info.get("best_score", 0)), bool(term), bool(trunc), bounces


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim ticks per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv and traces/")
    ap.add_argument("--save-traces", action="store_true",
                    help="Save action sequences for each episode")
    args = ap.parse_args(argv)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "env_name", "policy_name", "seed",
        "frame_skip", "sim_fps", "decision_hz",
        "episode_len_decisions", "return_sum", "best_score",
        "terminated", "truncated", "bounces",
    ]
    decision_hz = FPS / max(1, args.frame_skip)

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    print(f"Running policies={to_run} on {len(seeds)} seeds "
          f"(frame_skip={args.frame_skip}, decision_hz≈{decision_hz:.1f})")
    print(f"Writing summaries to {episodes_csv}")

    for policy_name in to_run:
        for seed in seeds:
            ep_len, ret_sum, best, terminated, truncated, bounces = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                save_traces=args.save_traces,
                out_dir=out_dir
            )
            row = [
                "JumperEnv", policy_name, seed,
                args.frame_skip, FPS, decision_hz,
                ep_len, f"{ret_sum:.1f}", best,
                int(terminated), int(truncated), bounces,
            ]
            write_episode_row(episodes_csv, header, row)

            print(f"[{policy_name}] seed={seed}  len={ep_len}  best={best}  "
                  f"ret={ret_sum:.1f}  term={terminated} trunc={truncated}  bounces={bounces}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
