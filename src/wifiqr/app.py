"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from wifiqr.constants import APP_NAME, APP_VERSION, DEFAULT_OUTPUT_NAME
from wifiqr.errors import ValidationError
from wifiqr.services.config_builder import CliOptions, collect_config
from wifiqr.services.prompts import Prompter, not_blank
from wifiqr.services.qr_service import generate_qr_image, render_terminal, save_qr_image
from wifiqr.services.styling import StyleKind, palette_listing
from wifiqr.services.wifi_payload import NetworkConfig, SecurityKind, build_wifi_payload

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _extended_help() -> str:
    styles = "\n".join(f"  {style.value:<12} - {style.description}" for style in StyleKind)
    colors = "\n".join(f"  {line}" for line in palette_listing())
    return f"""\
Examples:
  # Interactive mode (no flags)
  {APP_NAME}

  # Quick terminal display (default) - short flags
  {APP_NAME} -s MyWiFi -p mypass123

  # Save to file - long flags
  {APP_NAME} --ssid MyWiFi --password mypass123 --output my-wifi

  # Generate blue circle style - mixed flags
  {APP_NAME} -s MyWiFi -p mypass123 --style circle --color blue -o my-wifi

Security Types:
  wpa    - WPA/WPA2/WPA3 (most common)
  wep    - WEP (legacy, not recommended)
  open   - No password

QR Styles:
{styles}

Colors (or any #rgb / #rrggbb hex value):
{colors}

Notes:
  - Default behavior: displays QR code in terminal
  - Use -o/--output to save to file instead of terminal display
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Wi-Fi QR Code Generator\n"
            "Generate QR codes for Wi-Fi networks with custom styling"
        ),
        epilog=_extended_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=APP_VERSION)
    parser.add_argument("-s", "--ssid", help="Wi-Fi network name (SSID)")
    parser.add_argument("-p", "--password", help="Wi-Fi password")
    parser.add_argument(
        "-t", "--security", help="Security type: wpa, wep, open (default: wpa)"
    )
    parser.add_argument("-H", "--hidden", action="store_true", help="Hidden network")
    parser.add_argument("-S", "--style", help="QR style: square, circle (default: square)")
    parser.add_argument(
        "-c", "--color", help="QR color: palette name or hex value (default: black)"
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output filename (without extension) - saves to file instead of terminal",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="INFO",
        help="Logging verbosity (default: INFO)",
    )
    return parser


def _log_debug_info(config: NetworkConfig, payload: str) -> None:
    logger.info("📋 Debug Information:")
    logger.info("   SSID: %s", config.ssid)
    logger.info("   Security: %s (iOS compatible)", config.security.token)
    logger.info("   Hidden: %s (hidden field omitted for iOS compatibility)", config.hidden)
    logger.info("   Style: %s (%s)", config.style.value, config.style.description)
    logger.info("   Color: %s", config.color.label)
    logger.info("   QR Content: %s", payload)
    logger.info("   Field Order: ✅ S,T,P (iOS required format)")


def _log_advisories(config: NetworkConfig) -> None:
    if config.security is SecurityKind.WEP:
        logger.warning(
            "⚠️  Note: WEP is deprecated and may not work on modern iOS versions"
        )
    if config.style is StyleKind.CIRCLE:
        logger.info(
            "✨ Circle style: Square corners for reliability + circular data for aesthetics!"
        )


def _save(payload: str, config: NetworkConfig, filename: str) -> None:
    image = generate_qr_image(payload, style=config.style, color=config.color)
    path = save_qr_image(image, filename)
    logger.info("%s QR code saved as: %s", config.style.value.capitalize(), path)


def run(options: CliOptions, prompter: Prompter | None = None) -> int:
    """Collect the network details, then display or save the QR code."""
    logger.info("🔗 Wi-Fi QR Code Generator")
    logger.info("==========================")
    prompter = prompter or Prompter()

    try:
        config = collect_config(options, prompter)
        payload = build_wifi_payload(config)
        _log_debug_info(config, payload)
        _log_advisories(config)

        if options.output:
            _save(payload, config, options.output)
        else:
            logger.info("📟 Displaying QR code in terminal...")
            print(render_terminal(payload))

            if not options.has_any_flags and prompter.ask_confirm(
                "Do you want to save this QR code to a file?", default=False
            ):
                filename = prompter.ask_text(
                    "Enter filename (without .png extension):",
                    default=DEFAULT_OUTPUT_NAME,
                    validate=not_blank("Filename cannot be empty"),
                )
                _save(payload, config, filename)
    except ValidationError as exc:
        logger.error("❌ Error: %s", exc)
        return EXIT_FAILURE
    except OSError as exc:
        logger.error("❌ Error: could not write QR code: %s", exc)
        return EXIT_FAILURE
    except (KeyboardInterrupt, EOFError):
        logger.error("❌ Cancelled")
        return EXIT_INTERRUPTED

    logger.info("✅ Wi-Fi QR code generated successfully!")
    logger.info("📱 To use: Open Camera app on iPhone and point at QR code")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and return the exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
    )

    options = CliOptions(
        ssid=args.ssid,
        password=args.password,
        security=args.security,
        hidden=args.hidden,
        style=args.style,
        color=args.color,
        output=args.output,
    )
    return run(options)


if __name__ == "__main__":
    raise SystemExit(main())
