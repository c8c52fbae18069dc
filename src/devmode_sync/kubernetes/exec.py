"""kubectl exec destinations for the sync engine.

The sync engine reaches the container through a command that pipes the
agent's stdio over ``kubectl exec``. The agent binary was copied into the
shared volume by the init container the patcher injects.
"""

import shutil

from devmode_sync.constants import (
    EXEC_DESTINATION_TEMPLATE,
    KUBECTL_BINARY,
    MUTAGEN_AGENT_PATH,
    MUTAGEN_AGENT_SUBCOMMAND,
)
from devmode_sync.sync.base import DestinationResolver


class KubectlExecResolver(DestinationResolver):
    """Builds ``exec:'<kubectl exec ...>':<path>`` endpoints.

    Args:
        kubectl_path: Custom path to kubectl. If None, resolved from PATH.
        context: kubectl context to pass with ``--context``.
        kubeconfig: kubeconfig file to pass with ``--kubeconfig``.
    """

    def __init__(
        self,
        kubectl_path: str | None = None,
        context: str | None = None,
        kubeconfig: str | None = None,
    ) -> None:
        self._kubectl_path = kubectl_path
        self._context = context
        self._kubeconfig = kubeconfig

    def _get_binary(self) -> str:
        if self._kubectl_path:
            return self._kubectl_path
        return shutil.which(KUBECTL_BINARY) or KUBECTL_BINARY

    def build_exec_command(self, namespace: str, container_name: str, resource_name: str) -> list[str]:
        """Build the kubectl command that runs the agent inside the container."""
        cmd = [self._get_binary(), "exec", "-i"]
        if self._context:
            cmd.extend(["--context", self._context])
        if self._kubeconfig:
            cmd.extend(["--kubeconfig", self._kubeconfig])
        cmd.extend(
            [
                "--namespace",
                namespace,
                "--container",
                container_name,
                resource_name,
                "--",
                MUTAGEN_AGENT_PATH,
                MUTAGEN_AGENT_SUBCOMMAND,
            ]
        )
        return cmd

    async def resolve_destination(
        self,
        namespace: str,
        container_name: str,
        resource_name: str,
        target_path: str,
    ) -> str:
        command = self.build_exec_command(namespace, container_name, resource_name)
        return EXEC_DESTINATION_TEMPLATE.format(
            command=" ".join(command), target_path=target_path
        )
