"""Cluster certificates and their schema form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

CA_CERT_NAME = "kube-ca"
KUBE_ADMIN_CERT_NAME = "kube-admin"


@dataclass
class CertificatePKI:
    """One certificate of the cluster PKI with its key and locations."""

    certificate_pem: str = ""
    key_pem: str = ""
    config: str = ""
    name: str = ""
    common_name: str = ""
    ou_name: str = ""
    env_name: str = ""
    path: str = ""
    key_env_name: str = ""
    key_path: str = ""
    config_env_name: str = ""
    config_path: str = ""


def flatten_certificates(
    certificates: Mapping[str, CertificatePKI] | None,
) -> tuple[str, str, str, list[dict[str, str]]]:
    """Return CA cert, admin client cert, admin client key and the sorted list."""
    ca_crt = client_crt = client_key = ""
    if not certificates:
        return ca_crt, client_crt, client_key, []

    out = []
    for cert_id in sorted(certificates):
        cert = certificates[cert_id]
        if cert_id == CA_CERT_NAME:
            ca_crt = cert.certificate_pem
        if cert_id == KUBE_ADMIN_CERT_NAME:
            client_crt = cert.certificate_pem
            client_key = cert.key_pem
        out.append(
            {
                "id": cert_id,
                "certificate": cert.certificate_pem,
                "key": cert.key_pem,
                "config": cert.config,
                "name": cert.name,
                "common_name": cert.common_name,
                "ou_name": cert.ou_name,
                "env_name": cert.env_name,
                "path": cert.path,
                "key_env_name": cert.key_env_name,
                "key_path": cert.key_path,
                "config_env_name": cert.config_env_name,
                "config_path": cert.config_path,
            }
        )
    return ca_crt, client_crt, client_key, out