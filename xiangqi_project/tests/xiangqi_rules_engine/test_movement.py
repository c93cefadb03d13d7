"""
测试棋子走法生成

测试七种棋子的候选走法，包括蹩马腿、塞象眼、炮架和兵过河。
"""

import pytest
from xiangqi_project.src.xiangqi_rules_engine.rules_engine import ChessBoard, Color, Piece, PieceType
from xiangqi_project.src.xiangqi_rules_engine.rules_engine.movement import (
    candidate_moves, candidate_moves_for, MOVEMENT_RULES
)
from xiangqi_project.src.xiangqi_rules_engine.rules_engine.pieces import is_on_board


def red(piece_type, pos):
    return Piece(piece_type, Color.RED, pos)


def black(piece_type, pos):
    return Piece(piece_type, Color.BLACK, pos)


class TestMovementRules:
    """走法规则表的测试"""

    def test_rule_table_covers_all_piece_types(self):
        """测试规则表覆盖所有棋子类型"""
        assert set(MOVEMENT_RULES) == set(PieceType)

    def test_unknown_piece_type(self):
        """测试未知棋子类型返回空列表"""
        board = ChessBoard()
        assert candidate_moves('queen', Color.RED, (9, 4), board) == []
        assert candidate_moves(9, Color.RED, (9, 4), board) == []
        assert candidate_moves(PieceType.HORSE, 'purple', (9, 1), board) == []

    def test_off_board_position(self):
        """测试棋盘外的位置返回空列表"""
        board = ChessBoard()
        assert candidate_moves(PieceType.CHARIOT, Color.RED, (10, 0), board) == []
        assert candidate_moves(PieceType.CHARIOT, Color.RED, (0, -1), board) == []

    def test_accepts_names_and_strings(self):
        """测试接受名称形式的类型与颜色"""
        board = ChessBoard()
        assert candidate_moves('horse', 'red', (9, 1), board) == \
            candidate_moves(PieceType.HORSE, Color.RED, (9, 1), board)

    def test_candidates_never_own_or_off_board(self):
        """测试候选位置既不越界也不落在己方棋子上"""
        boards = [
            ChessBoard(),
            ChessBoard().with_move((7, 1), (4, 1)).with_move((0, 1), (2, 2)),
        ]
        for board in boards:
            for piece in board.get_pieces():
                for target in candidate_moves_for(piece, board):
                    assert is_on_board(target)
                    assert not board.is_own_piece(target, piece.color)

    def test_idempotence(self):
        """测试同一棋盘上重复调用返回相同的有序结果"""
        board = ChessBoard()
        for piece in board.get_pieces():
            assert candidate_moves_for(piece, board) == candidate_moves_for(piece, board)


class TestGeneralAndAdvisor:
    """帅/将与仕/士的测试"""

    def test_general_confined_to_palace(self):
        """测试帅只能在九宫内移动"""
        board = ChessBoard.from_pieces([red(PieceType.GENERAL, (7, 3))])
        moves = candidate_moves(PieceType.GENERAL, Color.RED, (7, 3), board)
        assert sorted(moves) == [(7, 4), (8, 3)]

    def test_general_initial_position(self):
        """测试初始局面帅只能向前一步"""
        board = ChessBoard()
        assert candidate_moves(PieceType.GENERAL, Color.RED, (9, 4), board) == [(8, 4)]

    def test_general_sees_opposing_general(self):
        """测试帅将直接相望时对方将帅位置计为攻击目标"""
        board = ChessBoard.from_pieces([
            red(PieceType.GENERAL, (9, 4)),
            black(PieceType.GENERAL, (0, 4))
        ])
        assert (0, 4) in candidate_moves(PieceType.GENERAL, Color.RED, (9, 4), board)
        assert (9, 4) in candidate_moves(PieceType.GENERAL, Color.BLACK, (0, 4), board)

    def test_general_blocked_line_of_sight(self):
        """测试中间有子时不能飞将"""
        board = ChessBoard.from_pieces([
            red(PieceType.GENERAL, (9, 4)),
            black(PieceType.SOLDIER, (5, 4)),
            black(PieceType.GENERAL, (0, 4))
        ])
        assert (0, 4) not in candidate_moves(PieceType.GENERAL, Color.RED, (9, 4), board)

    def test_advisor_moves(self):
        """测试仕斜走一格且不出九宫"""
        board = ChessBoard.from_pieces([red(PieceType.ADVISOR, (8, 4))])
        moves = candidate_moves(PieceType.ADVISOR, Color.RED, (8, 4), board)
        assert sorted(moves) == [(7, 3), (7, 5), (9, 3), (9, 5)]

        corner = ChessBoard.from_pieces([black(PieceType.ADVISOR, (0, 3))])
        assert candidate_moves(PieceType.ADVISOR, Color.BLACK, (0, 3), corner) == [(1, 4)]


class TestElephant:
    """相/象的测试"""

    def test_elephant_eye_block(self):
        """测试塞象眼：(8, 1) 有子时相不能到 (7, 0)"""
        board = ChessBoard.from_pieces([
            red(PieceType.ELEPHANT, (9, 2)),
            black(PieceType.SOLDIER, (8, 1))
        ])
        moves = candidate_moves(PieceType.ELEPHANT, Color.RED, (9, 2), board)
        assert (7, 0) not in moves
        assert moves == [(7, 4)]

    def test_elephant_cannot_cross_river(self):
        """测试相不能过河"""
        board = ChessBoard.from_pieces([red(PieceType.ELEPHANT, (5, 4))])
        moves = candidate_moves(PieceType.ELEPHANT, Color.RED, (5, 4), board)
        assert sorted(moves) == [(7, 2), (7, 6)]

        board = ChessBoard.from_pieces([black(PieceType.ELEPHANT, (4, 2))])
        moves = candidate_moves(PieceType.ELEPHANT, Color.BLACK, (4, 2), board)
        assert sorted(moves) == [(2, 0), (2, 4)]


class TestHorse:
    """马的测试"""

    def test_horse_leg_block(self):
        """测试蹩马腿：(8, 1) 有子时马不能跳到 (7, 0) 和 (7, 2)"""
        board = ChessBoard.from_pieces([
            red(PieceType.HORSE, (9, 1)),
            red(PieceType.CHARIOT, (8, 1))
        ])
        moves = candidate_moves(PieceType.HORSE, Color.RED, (9, 1), board)
        assert (7, 0) not in moves
        assert (7, 2) not in moves
        assert moves == [(8, 3)]

    def test_horse_in_center(self):
        """测试马在中间时有八个落点"""
        board = ChessBoard.from_pieces([red(PieceType.HORSE, (4, 4))])
        moves = candidate_moves(PieceType.HORSE, Color.RED, (4, 4), board)
        assert len(moves) == 8
        assert moves[0] == (2, 3)

    def test_horse_captures_enemy_not_own(self):
        """测试马可以吃敌方棋子，不能吃己方棋子"""
        board = ChessBoard.from_pieces([
            red(PieceType.HORSE, (4, 4)),
            black(PieceType.CANNON, (2, 3)),
            red(PieceType.SOLDIER, (2, 5))
        ])
        moves = candidate_moves(PieceType.HORSE, Color.RED, (4, 4), board)
        assert (2, 3) in moves
        assert (2, 5) not in moves

    def test_initial_horse(self):
        """测试初始局面马有两个落点"""
        board = ChessBoard()
        assert sorted(candidate_moves(PieceType.HORSE, Color.RED, (9, 1), board)) == [(7, 0), (7, 2)]


class TestChariotAndCannon:
    """车与炮的测试"""

    def test_chariot_slides_and_captures(self):
        """测试车直线滑行，遇敌吃子后停止，遇己方停止"""
        board = ChessBoard.from_pieces([
            red(PieceType.CHARIOT, (5, 4)),
            black(PieceType.HORSE, (2, 4)),
            red(PieceType.SOLDIER, (5, 6))
        ])
        moves = candidate_moves(PieceType.CHARIOT, Color.RED, (5, 4), board)

        assert (4, 4) in moves and (3, 4) in moves and (2, 4) in moves
        assert (1, 4) not in moves
        assert (5, 5) in moves
        assert (5, 6) not in moves and (5, 7) not in moves
        assert (9, 4) in moves
        assert (5, 0) in moves

    def test_chariot_ray_order(self):
        """测试每条射线按由近及远排列"""
        board = ChessBoard.from_pieces([red(PieceType.CHARIOT, (9, 0))])
        moves = candidate_moves(PieceType.CHARIOT, Color.RED, (9, 0), board)
        assert moves[:9] == [(8, 0), (7, 0), (6, 0), (5, 0), (4, 0), (3, 0), (2, 0), (1, 0), (0, 0)]
        assert len(moves) == 17

    def test_cannon_needs_mount_to_capture(self):
        """测试炮隔一子吃子"""
        board = ChessBoard.from_pieces([
            red(PieceType.CANNON, (7, 4)),
            red(PieceType.SOLDIER, (5, 4)),
            black(PieceType.CHARIOT, (2, 4)),
            black(PieceType.GENERAL, (0, 4))
        ])
        moves = candidate_moves(PieceType.CANNON, Color.RED, (7, 4), board)

        assert (6, 4) in moves
        # 炮架本身与炮架后的空位都不是落点
        assert (5, 4) not in moves
        assert (4, 4) not in moves
        assert (3, 4) not in moves
        assert (2, 4) in moves
        # 吃子后该方向终止
        assert (0, 4) not in moves

    def test_cannon_does_not_capture_without_mount(self):
        """测试炮不能直接吃相邻的敌子"""
        board = ChessBoard.from_pieces([
            red(PieceType.CANNON, (5, 0)),
            black(PieceType.CHARIOT, (5, 3))
        ])
        moves = candidate_moves(PieceType.CANNON, Color.RED, (5, 0), board)
        assert (5, 1) in moves and (5, 2) in moves
        assert (5, 3) not in moves

    def test_cannon_blocked_by_own_piece_after_mount(self):
        """测试炮架后第一个棋子为己方时该方向终止"""
        board = ChessBoard.from_pieces([
            red(PieceType.CANNON, (9, 1)),
            black(PieceType.SOLDIER, (6, 1)),
            red(PieceType.HORSE, (4, 1)),
            black(PieceType.CHARIOT, (2, 1))
        ])
        moves = candidate_moves(PieceType.CANNON, Color.RED, (9, 1), board)
        assert (4, 1) not in moves
        assert (2, 1) not in moves

    def test_initial_cannon(self):
        """测试初始局面炮可以打马"""
        board = ChessBoard()
        moves = candidate_moves(PieceType.CANNON, Color.RED, (7, 1), board)
        assert (0, 1) in moves
        assert len(moves) == 12


class TestSoldier:
    """兵/卒的测试"""

    def test_soldier_before_river(self):
        """测试未过河的兵只能前进"""
        board = ChessBoard.from_pieces([red(PieceType.SOLDIER, (6, 4))])
        assert candidate_moves(PieceType.SOLDIER, Color.RED, (6, 4), board) == [(5, 4)]

        board = ChessBoard.from_pieces([red(PieceType.SOLDIER, (5, 4))])
        assert candidate_moves(PieceType.SOLDIER, Color.RED, (5, 4), board) == [(4, 4)]

    def test_soldier_after_river(self):
        """测试过河兵可以左右平移，不能后退"""
        board = ChessBoard.from_pieces([red(PieceType.SOLDIER, (4, 4))])
        moves = candidate_moves(PieceType.SOLDIER, Color.RED, (4, 4), board)
        assert moves == [(3, 4), (4, 3), (4, 5)]
        assert (5, 4) not in moves

    def test_black_soldier_direction(self):
        """测试黑卒向第9行前进"""
        board = ChessBoard.from_pieces([black(PieceType.SOLDIER, (3, 0))])
        assert candidate_moves(PieceType.SOLDIER, Color.BLACK, (3, 0), board) == [(4, 0)]

        board = ChessBoard.from_pieces([black(PieceType.SOLDIER, (5, 0))])
        assert candidate_moves(PieceType.SOLDIER, Color.BLACK, (5, 0), board) == [(6, 0), (5, 1)]

    def test_soldier_on_last_rank(self):
        """测试兵到底线后只能平移"""
        board = ChessBoard.from_pieces([red(PieceType.SOLDIER, (0, 0))])
        assert candidate_moves(PieceType.SOLDIER, Color.RED, (0, 0), board) == [(0, 1)]

    @pytest.mark.parametrize("pos", [(6, 0), (6, 2), (6, 4), (6, 6), (6, 8)])
    def test_initial_soldiers(self, pos):
        """测试初始局面每个兵只有一个落点"""
        board = ChessBoard()
        assert candidate_moves(PieceType.SOLDIER, Color.RED, pos, board) == [(pos[0] - 1, pos[1])]
