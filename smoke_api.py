# smoke_api.py — round-trip tester against a running server (health → position → completion)
import os, sys, argparse
from typing import List

from progress_api.client import ProgressClient, ProgressAPIError, new_user_id

# ---------- CLI / ENV ----------

def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Progress API smoke tests")
    p.add_argument("--base", default=os.environ.get("BASE_URL", "http://localhost:3000/api"),
                   help="API base URL including prefix (default: http://localhost:3000/api)")
    p.add_argument("--user", default=None, help="userId to use (default: fresh random id)")
    p.add_argument("--level", type=int, default=3, help="Level used for the position round trip")
    p.add_argument("--timeout", type=int, default=10, help="HTTP timeout seconds (default 10)")
    return p

# ---------- Checks ----------

def expect(cond: bool, msg: str, errs: List[str]):
    if not cond: errs.append(msg)

def check_health(client: ProgressClient, uid: str, errs: List[str]):
    rec = client.get_health(uid)  # 404 -> init
    print(f"[health] get/init -> {rec}")
    expect(rec.get("health") == 100 and rec.get("maxHealth") == 100, "fresh health is not 100/100", errs)
    rec = client.update_health(uid, 42)
    print(f"[health] update -> {rec}")
    expect(rec.get("health") == 42 and rec.get("maxHealth") == 100, "health update lost maxHealth", errs)

def check_position(client: ProgressClient, uid: str, level: int, errs: List[str]):
    rec = client.get_position(uid, level)
    print(f"[position] default -> {rec}")
    expect(rec.get("position") == {"x": 0, "y": 0, "z": 0}, "unvisited level is not at origin", errs)
    client.save_position(uid, level, {"x": 1, "y": 2, "z": 3})
    rec = client.get_position(uid, level)
    print(f"[position] saved -> {rec}")
    expect(rec.get("position") == {"x": 1, "y": 2, "z": 3}, "saved position not returned", errs)
    other = client.get_position(uid, level + 1)
    expect(other.get("position") == {"x": 0, "y": 0, "z": 0}, "levels are not independent", errs)

def check_completion(client: ProgressClient, uid: str, errs: List[str]):
    expect(client.get_completion(uid) is None, "fresh user already has completion", errs)
    rec = client.save_completion(uid, 5)
    print(f"[completion] save 5 -> {rec}")
    expect(rec.get("highestLevelCompleted") == 5, "highest not raised to currentLevel", errs)
    rec = client.save_completion(uid, 2)
    print(f"[completion] save 2 -> {rec}")
    expect(rec.get("highestLevelCompleted") == 5, "highest dropped without explicit value", errs)

# ---------- Runner ----------

def run(args: argparse.Namespace) -> bool:
    client = ProgressClient(args.base, timeout=args.timeout)
    uid = args.user or new_user_id()
    print("=== Progress API smoke ===")
    print("BASE=", args.base, " USER=", uid)

    errs: List[str] = []
    try:
        check_health(client, uid, errs)
        check_position(client, uid, args.level, errs)
        check_completion(client, uid, errs)
    except ProgressAPIError as e:
        errs.append(f"request failed: {e}")

    if errs:
        print("\n=== FAILURES ===")
        for e in errs:
            print("-", e)
        print("\nRESULT: FAIL ❌")
        return False
    print("\nRESULT: PASS ✅")
    return True

# ---------- main ----------

if __name__ == "__main__":
    ok_all = run(make_parser().parse_args())
    sys.exit(0 if ok_all else 1)
