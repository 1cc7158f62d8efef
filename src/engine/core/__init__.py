"""
どこで: `engine.core` サブパッケージ。
何を: ホスト型アダプタ（Protocol）、四元数、変換/シーン/カメラ/アニメータ操作、フレーム駆動を提供。
なぜ: ホストエンジンのオブジェクトに対する薄い操作群を、ホスト非依存の関数として上位層（api）から再利用するため。
"""
from __future__ import annotations
