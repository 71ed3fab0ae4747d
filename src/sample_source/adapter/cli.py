from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional

from .config import EnvConfig
from .errors import DecodeError


def resolve(cfg: EnvConfig) -> Dict[str, object]:
    overrides = cfg.get_cloud_event_overrides()
    observability = cfg.get_observability_config()
    leader_election, err = cfg.get_leader_election_config()
    if err is not None:
        print(f"WARN leader election: {err}", file=sys.stderr)

    oidc = cfg.get_oidc_service_account_name()
    return {
        "component": cfg.component,
        "namespace": cfg.get_namespace(),
        "name": cfg.get_name(),
        "resourceGroup": cfg.resource_group,
        "sink": cfg.get_sink(),
        "audience": cfg.get_audience(),
        "oidcServiceAccount": str(oidc) if oidc else None,
        "hasCACerts": cfg.get_ca_certs() is not None,
        "sinkTimeout": cfg.get_sink_timeout(),
        "ceOverrides": overrides.to_payload(),
        "observability": observability.to_payload(),
        "leaderElection": leader_election.to_payload(),
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sample-adapter-config",
        description="Resolve the adapter configuration from the environment and print it as JSON",
    )
    parser.add_argument("--component", help="Component name to set after reading the environment")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    args = parser.parse_args(argv)

    cfg = EnvConfig.from_env()
    if args.component:
        cfg.set_component(args.component)

    try:
        resolved = resolve(cfg)
    except DecodeError as exc:
        print(f"FATAL: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(resolved, indent=args.indent, sort_keys=True))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
