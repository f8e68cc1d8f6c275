# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from authservice.app import create_app
from authservice.infrastructure.container import container


def main() -> None:
    app = create_app(container)
    app.run(host=container.config.host, port=container.config.port)


if __name__ == "__main__":
    main()
