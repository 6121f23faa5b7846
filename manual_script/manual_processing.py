"""
Script de procesamiento manual local.
Calcula las métricas ópticas de una única matriz intrínseca indicada por línea
de comandos, sin cola ni Worker.

Uso:
    python manual_script/manual_processing.py 1400 1400 960 540 --width 1920 --height 1080
"""
import argparse
import logging
import sys
from pathlib import Path

# Aseguramos que el directorio raíz esté en el path para los imports
sys.path.append(str(Path(__file__).parent.parent))

from src.domain import IntrinsicSample, build_intrinsic_matrix
from src.domain.optics import compute_metrics, format_distance, format_metrics
from src.utils import get_resolution_profile


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    parser = argparse.ArgumentParser(description="Métricas ópticas de una matriz intrínseca.")
    parser.add_argument("fx", type=float)
    parser.add_argument("fy", type=float)
    parser.add_argument("cx", type=float)
    parser.add_argument("cy", type=float)
    parser.add_argument("--profile", default="wide_hd", help="Perfil de resolución (wide_hd, wide_4k)")
    parser.add_argument("--width", type=int, help="Ancho de imagen; por defecto el del perfil")
    parser.add_argument("--height", type=int, help="Alto de imagen; por defecto el del perfil")
    parser.add_argument("--lens-position", type=float, default=0.0)
    args = parser.parse_args()

    try:
        profile = get_resolution_profile(args.profile)
        sample = IntrinsicSample(
            image_width=args.width or profile.width,
            image_height=args.height or profile.height,
            matrix=build_intrinsic_matrix(args.fx, args.fy, args.cx, args.cy),
            lens_position=args.lens_position
        ).validate()
    except ValueError as e:
        logging.error(f"Parámetros inválidos: {e}")
        sys.exit(1)

    metrics = compute_metrics(sample, profile.calibration)
    print(format_metrics(metrics))
    print("■Distancia al sujeto")
    print(f" {format_distance(metrics)}")


if __name__ == "__main__":
    main()
