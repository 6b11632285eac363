"""
Matrix — операции над матрицами

Матрица представлена списком строк одинаковой длины:

    [[1, 2, 3],
     [4, 5, 6]]

Нумерация строк и столбцов начинается с 0 и идёт до m - 1 и n - 1, где
(m, n) — размер матрицы.

Модуль обеспечивает:
- Создание (new, diag)
- Ограниченное обновление областей (update, update_element, update_row,
  update_col, update_map)
- Чтение областей (get_submatrix, get_element, get_row, get_col)
- Перестройку (reshape, drop_row, drop_col, concat_row, concat_col,
  transpose, flip_lr, flip_ud)
- Арифметику (add, sub, product, schur_product, mult_by_num), построенную
  построчным делегированием в vector

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая операция чтения/записи области сначала проходит проверки из
   linalg.validation и только потом строит результат
2. Аргументы никогда не изменяются: результат всегда новый список
3. Отказ — это Err(MatrixError) с видом нарушения, а не исключение
"""

from numbers import Number
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from matrix_reloaded.core.config import DEFAULT_TOLERANCE, ToleranceConfig
from matrix_reloaded.core.contracts import ROW_VECTOR_CONTRACT
from matrix_reloaded.core.domain import parse_dimension, parse_index
from matrix_reloaded.core.errors import ErrorKind
from matrix_reloaded.core.numerics import is_close as _is_close_number
from matrix_reloaded.core.numerics import is_number
from matrix_reloaded.core.result import Err, Ok, Result, and_then2, collect, fail
from matrix_reloaded.linalg import vector as _vector
from matrix_reloaded.linalg.validation import (
    check_all_in_range,
    check_all_numbers,
    check_col_in_matrix,
    check_column_vector,
    check_element_in_matrix,
    check_index,
    check_matrix,
    check_non_neg_integer,
    check_not_all_dropped,
    check_number_in_range,
    check_positive_integer,
    check_reshapeable,
    check_row_in_matrix,
    check_row_vector,
    check_same_size,
    check_submatrix_in_matrix,
    check_submatrix_smaller_than_matrix,
)

Matrix = List[List[Number]]
Dimension = Union[int, Tuple[int, int]]
Index = Tuple[int, int]
Submatrix = Union[Number, List[Number], Matrix]


# =============================================================================
# РАЗМЕР И ВНУТРЕННИЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def size(matrix: Matrix) -> Tuple[int, int]:
    """
    Размер матрицы (rows, cols).

    Examples:
        >>> size([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        (3, 4)
    """
    return (len(matrix), len(matrix[0]))


def _pair(index: Sequence[int]) -> Index:
    """Уже проверенный индекс -> (row, col)."""
    return parse_index(index).unwrap().as_tuple()


def _make_update(matrix: Matrix, submatrix: Matrix, index: Index) -> Matrix:
    from_row, from_col = index
    to_row = from_row + len(submatrix)
    to_col = from_col + len(submatrix[0])

    updated = [list(row) for row in matrix]
    for i in range(from_row, to_row):
        updated[i][from_col:to_col] = submatrix[i - from_row]
    return updated


def _make_get_submatrix(matrix: Matrix, index: Index, dim: Tuple[int, int]) -> Matrix:
    from_row, from_col = index
    rows, cols = dim
    return [list(row[from_col:from_col + cols]) for row in matrix[from_row:from_row + rows]]


def _payload_as_matrix(submatrix: Any) -> Result[Matrix]:
    """Число -> 1×1, строка-вектор -> 1×n, матрица — без изменений."""
    if is_number(submatrix):
        return Ok([[submatrix]])
    if ROW_VECTOR_CONTRACT.is_valid(submatrix):
        return Ok([submatrix])
    checked = check_matrix(submatrix)
    if isinstance(checked, Err):
        return fail(
            ErrorKind.MALFORMED_PAYLOAD,
            "Submatrix must be a number, a row vector or a matrix! "
            f"{checked.message}",
            submatrix=submatrix,
        )
    return checked


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


def new(dimension: Dimension, val: Number = 0) -> Result[Matrix]:
    """
    Новая матрица заданного размера, заполненная val.

    Для положительного целого n — квадратная матрица n×n, для пары (m, n) —
    прямоугольная.

    Returns:
        Ok(matrix) или Err(DIMENSION_INVALID)

    Examples:
        >>> new(3)
        Ok(value=[[0, 0, 0], [0, 0, 0], [0, 0, 0]])
        >>> new((2, 3), -10)
        Ok(value=[[-10, -10, -10], [-10, -10, -10]])
    """

    def fill(dim) -> Matrix:
        rows, cols = dim.as_tuple()
        return [[val] * cols for _ in range(rows)]

    return parse_dimension(dimension).map(fill)


def diag(vector: List[Number], k: int = 0) -> Result[Matrix]:
    """
    Квадратная матрица с элементами вектора на k-й диагонали.

    k = 0 — главная диагональ, k > 0 — над ней (vector[i] на (i, i + k)),
    k < 0 — под ней (vector[i] на (i - k, i)). Размер матрицы
    len(vector) + |k|.

    Ленточные матрицы собираются сложением нескольких diag с разными k.

    Returns:
        Ok(matrix) или Err(MALFORMED_PAYLOAD / MALFORMED_INDEX / OUT_OF_RANGE)

    Examples:
        >>> diag([1, 2, 3])
        Ok(value=[[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        >>> diag([1, 2], -1)
        Ok(value=[[0, 0, 0], [1, 0, 0], [0, 2, 0]])
    """
    checked = check_row_vector(vector, vector)
    if isinstance(checked, Err):
        return checked
    if not isinstance(k, int) or isinstance(k, bool):
        return fail(
            ErrorKind.MALFORMED_INDEX,
            f"The diagonal number k={k!r} must be an integer!",
            k=k,
        )

    length = len(vector)
    if abs(k) > length:
        side = "upper" if k > 0 else "lower"
        return fail(
            ErrorKind.OUT_OF_RANGE,
            f"Length of {side} bidiagonal must be less or equal to length of vector! "
            f"Got |k|={abs(k)} for vector of length {length}.",
            k=k,
            length=length,
        )

    positions = [(i, i + k) if k >= 0 else (i - k, i) for i in range(length)]

    def place(matrix: Matrix) -> Matrix:
        for (row, col), el in zip(positions, vector):
            matrix[row][col] = el
        return matrix

    return new(length + abs(k)).map(place)


# =============================================================================
# ОБНОВЛЕНИЕ ОБЛАСТЕЙ
# =============================================================================


def update(matrix: Matrix, submatrix: Submatrix, index: Index) -> Result[Matrix]:
    """
    Замена области матрицы подматрицей.

    Левый верхний угол области задаёт index (row, col). Подматрица должна
    целиком лежать внутри матрицы и быть строго меньше её по обоим
    измерениям: замена всей матрицы через update не поддерживается.

    Args:
        matrix: Исходная матрица
        submatrix: Число, строка-вектор или матрица
        index: Позиция левого верхнего угла

    Returns:
        Ok(новая матрица) или Err

    Examples:
        >>> update(new(4).unwrap(), [[1, 2], [3, 4]], (1, 2))
        Ok(value=[[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4], [0, 0, 0, 0]])
    """
    checked = check_matrix(matrix).and_then(lambda m: check_index(m, index))

    def place(mat: Matrix, sub: Matrix) -> Result[Matrix]:
        at = _pair(index)
        return (
            check_submatrix_in_matrix(mat, size(mat), size(sub), at, "update")
            .and_then(lambda m: check_submatrix_smaller_than_matrix(m, size(m), size(sub), "update"))
            .map(lambda m: _make_update(m, sub, at))
        )

    return and_then2(checked, _payload_as_matrix(submatrix), place)


def update_element(matrix: Matrix, el: Number, index: Index) -> Result[Matrix]:
    """
    Замена одного элемента.

    Examples:
        >>> update_element(new(3).unwrap(), -1, (1, 1))
        Ok(value=[[0, 0, 0], [0, -1, 0], [0, 0, 0]])
    """
    if not is_number(el):
        return fail(
            ErrorKind.MALFORMED_PAYLOAD,
            f"The element {el!r} must be a number!",
            element=el,
        )
    return (
        check_matrix(matrix)
        .and_then(lambda m: check_index(m, index))
        .and_then(lambda m: check_element_in_matrix(m, size(m), _pair(index), "update"))
        .map(lambda m: _make_update(m, [[el]], _pair(index)))
    )


def update_row(matrix: Matrix, row: List[Number], index: Index) -> Result[Matrix]:
    """
    Замена части строки строкой-вектором начиная с позиции index.

    Строка может занимать всю ширину матрицы.

    Examples:
        >>> update_row(new(4).unwrap(), [1, 2, 3], (3, 1))
        Ok(value=[[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 1, 2, 3]])
    """
    return (
        check_matrix(matrix)
        .and_then(lambda m: check_index(m, index))
        .and_then(lambda m: check_row_vector(m, row))
        .and_then(lambda m: check_row_in_matrix(m, size(m), len(row), _pair(index), "update"))
        .map(lambda m: _make_update(m, [row], _pair(index)))
    )


def update_col(matrix: Matrix, col: List[List[Number]], index: Index) -> Result[Matrix]:
    """
    Замена части столбца столбцом-вектором начиная с позиции index.

    Столбец может занимать всю высоту матрицы.

    Examples:
        >>> update_col(new(4).unwrap(), [[1], [2], [3]], (0, 1))
        Ok(value=[[0, 1, 0, 0], [0, 2, 0, 0], [0, 3, 0, 0], [0, 0, 0, 0]])
    """
    return (
        check_matrix(matrix)
        .and_then(lambda m: check_index(m, index))
        .and_then(lambda m: check_column_vector(m, col))
        .and_then(lambda m: check_col_in_matrix(m, size(m), len(col), _pair(index), "update"))
        .map(lambda m: _make_update(m, col, _pair(index)))
    )


def update_map(matrix: Matrix, submatrix: Submatrix, position_indices: Sequence[Index]) -> Result[Matrix]:
    """
    Размещение одной и той же подматрицы в нескольких позициях.

    Позиции применяются слева направо, каждая к результату предыдущей,
    поэтому более поздние могут перезаписать более ранние. При отказе
    возвращается ошибка первой неудачной позиции; частично обновлённая
    матрица наружу не попадает.

    Examples:
        >>> update_map(new(5).unwrap(), new(2, 1).unwrap(), [(0, 0), (3, 3)])
        Ok(value=[[1, 1, 0, 0, 0], [1, 1, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 1, 1], [0, 0, 0, 1, 1]])
    """
    result: Result[Matrix] = Ok(matrix)
    for position in position_indices:
        result = result.and_then(lambda m, p=position: update(m, submatrix, p))
    return result


# =============================================================================
# ЧТЕНИЕ ОБЛАСТЕЙ
# =============================================================================


def _span(index: Index, dimension: Dimension) -> Result[Tuple[int, int]]:
    """
    Размер читаемой области.

    Число d — квадрат d×d. Пара (to_row, to_col) — индекс правого нижнего
    угла включительно.
    """
    if isinstance(dimension, (tuple, list)) and len(dimension) == 2:
        to_row, to_col = dimension
        from_row, from_col = index
        if all(isinstance(v, int) and not isinstance(v, bool) for v in (to_row, to_col)) and (
            to_row >= from_row and to_col >= from_col
        ):
            return Ok((to_row - from_row + 1, to_col - from_col + 1))
        return fail(
            ErrorKind.DIMENSION_INVALID,
            f"The end index {tuple(dimension)!r} must be integers not smaller "
            f"than the start index {tuple(index)!r}!",
            index=index,
            dimension=dimension,
        )
    return check_positive_integer((dimension, dimension), dimension, "size of submatrix")


def get_submatrix(matrix: Matrix, index: Index, dimension: Dimension) -> Result[Matrix]:
    """
    Чтение прямоугольной области.

    dimension — положительное число (квадратная область) или индекс правого
    нижнего угла (to_row, to_col) включительно. Область должна лежать внутри
    матрицы и быть строго меньше её.

    Examples:
        >>> mat = [[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4], [0, 0, 0, 0]]
        >>> get_submatrix(mat, (1, 2), 2)
        Ok(value=[[1, 2], [3, 4]])
        >>> mat = [[0, 0, 0, 0], [0, 0, 0, 0], [0, 1, 2, 3], [0, 4, 5, 6]]
        >>> get_submatrix(mat, (2, 1), (3, 3))
        Ok(value=[[1, 2, 3], [4, 5, 6]])
    """

    def extract(mat: Matrix) -> Result[Matrix]:
        at = _pair(index)
        return _span(at, dimension).and_then(
            lambda dim: check_submatrix_in_matrix(mat, size(mat), dim, at, "get")
            .and_then(lambda m: check_submatrix_smaller_than_matrix(m, size(m), dim, "get"))
            .map(lambda m: _make_get_submatrix(m, at, dim))
        )

    return check_matrix(matrix).and_then(lambda m: check_index(m, index)).and_then(extract)


def get_element(matrix: Matrix, index: Index) -> Result[Number]:
    """
    Examples:
        >>> get_element([[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4], [0, 0, 0, 0]], (2, 2))
        Ok(value=3)
    """
    return (
        check_matrix(matrix)
        .and_then(lambda m: check_index(m, index))
        .and_then(lambda m: check_element_in_matrix(m, size(m), _pair(index), "get"))
        .map(lambda m: m[index[0]][index[1]])
    )


def get_row(matrix: Matrix, index: Union[int, Index], num_of_el: Optional[int] = None) -> Result[List[Number]]:
    """
    Чтение строки (или её части) как строки-вектора.

    get_row(matrix, row_num) — вся строка row_num.
    get_row(matrix, (row, col), num_of_el) — num_of_el элементов строки row
    начиная со столбца col.

    Examples:
        >>> mat = [[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4], [0, 0, 0, 0]]
        >>> get_row(mat, 1)
        Ok(value=[0, 0, 1, 2])
        >>> get_row(mat, (2, 1), 2)
        Ok(value=[0, 3])
    """
    if num_of_el is None:
        row_num = index
        return (
            check_matrix(matrix)
            .and_then(lambda m: check_non_neg_integer(m, row_num, "row"))
            .and_then(lambda m: check_number_in_range(m, size(m)[0], row_num, "row"))
            .map(lambda m: list(m[row_num]))
        )

    return (
        check_matrix(matrix)
        .and_then(lambda m: check_index(m, index))
        .and_then(lambda m: check_positive_integer(m, num_of_el))
        .and_then(lambda m: check_row_in_matrix(m, size(m), num_of_el, _pair(index), "get"))
        .map(lambda m: list(m[index[0]][index[1]:index[1] + num_of_el]))
    )


def get_col(matrix: Matrix, index: Union[int, Index], num_of_el: Optional[int] = None) -> Result[List[List[Number]]]:
    """
    Чтение столбца (или его части) как столбца-вектора.

    get_col(matrix, col_num) — весь столбец col_num.
    get_col(matrix, (row, col), num_of_el) — num_of_el элементов столбца col
    начиная со строки row.

    Examples:
        >>> mat = [[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4], [0, 0, 0, 0]]
        >>> get_col(mat, 3)
        Ok(value=[[0], [2], [4], [0]])
        >>> get_col(mat, (1, 2), 2)
        Ok(value=[[1], [3]])
    """
    if num_of_el is None:
        col_num = index
        return (
            check_matrix(matrix)
            .and_then(lambda m: check_non_neg_integer(m, col_num, "column"))
            .and_then(lambda m: check_number_in_range(m, size(m)[1], col_num, "column"))
            .map(lambda m: [[row[col_num]] for row in m])
        )

    return (
        check_matrix(matrix)
        .and_then(lambda m: check_index(m, index))
        .and_then(lambda m: check_positive_integer(m, num_of_el))
        .and_then(lambda m: check_col_in_matrix(m, size(m), num_of_el, _pair(index), "get"))
        .map(lambda m: [[row[index[1]]] for row in m[index[0]:index[0] + num_of_el]])
    )


# =============================================================================
# СТРУКТУРНЫЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def transpose(matrix: Matrix) -> Matrix:
    """
    Транспонирование.

    Examples:
        >>> transpose([[1, 2, 3], [4, 5, 6]])
        [[1, 4], [2, 5], [3, 6]]
    """
    return [list(col) for col in zip(*matrix)]


def flip_lr(matrix: Matrix) -> Matrix:
    """
    Отражение столбцов слева направо.

    Examples:
        >>> flip_lr([[1, 2, 3], [4, 5, 6]])
        [[3, 2, 1], [6, 5, 4]]
    """
    return [list(reversed(row)) for row in matrix]


def flip_ud(matrix: Matrix) -> Matrix:
    """
    Отражение строк сверху вниз.

    Examples:
        >>> flip_ud([[1, 2, 3], [4, 5, 6]])
        [[4, 5, 6], [1, 2, 3]]
    """
    return [list(row) for row in reversed(matrix)]


def _drop_rows(matrix: Matrix, rows: List[int], vec: str) -> Result[Matrix]:
    def keep(mat: Matrix) -> Matrix:
        to_drop = set(rows)
        return [list(row) for i, row in enumerate(mat) if i not in to_drop]

    return (
        check_all_numbers(matrix, rows, vec)
        .and_then(lambda m: check_all_in_range(m, size(m)[0], rows, vec))
        .and_then(lambda m: check_not_all_dropped(m, size(m), len(rows), vec))
        .map(keep)
    )


def _as_number_list(nums: Union[int, Sequence[int]], vec: str) -> Result[List[int]]:
    if isinstance(nums, (list, tuple)):
        return Ok(list(nums))
    return check_non_neg_integer([nums], nums, vec)


def drop_row(matrix: Matrix, rows: Union[int, Sequence[int]]) -> Result[Matrix]:
    """
    Удаление строки или списка строк.

    Хотя бы одна строка должна остаться.

    Examples:
        >>> mat = [[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4], [0, 0, 0, 0]]
        >>> drop_row(mat, 2)
        Ok(value=[[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 0, 0]])
        >>> drop_row(mat, [0, 3])
        Ok(value=[[0, 0, 1, 2], [0, 0, 3, 4]])
    """
    return and_then2(
        check_matrix(matrix),
        _as_number_list(rows, "row"),
        lambda m, nums: _drop_rows(m, nums, "row"),
    )


def drop_col(matrix: Matrix, cols: Union[int, Sequence[int]]) -> Result[Matrix]:
    """
    Удаление столбца или списка столбцов.

    Столбцы удаляются как строки транспонированной матрицы, затем результат
    транспонируется обратно.

    Examples:
        >>> mat = [[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4], [0, 0, 0, 0]]
        >>> drop_col(mat, 2)
        Ok(value=[[0, 0, 0], [0, 0, 2], [0, 0, 4], [0, 0, 0]])
    """
    return and_then2(
        check_matrix(matrix),
        _as_number_list(cols, "column"),
        lambda m, nums: _drop_rows(transpose(m), nums, "column"),
    ).map(transpose)


def concat_row(matrix1: Matrix, matrix2: Matrix) -> Result[Matrix]:
    """
    Горизонтальное соединение. Число строк должно совпадать.

    Examples:
        >>> concat_row([[1, 0], [0, 1]], [[2], [3]])
        Ok(value=[[1, 0, 2], [0, 1, 3]])
    """

    def join(mat1: Matrix, mat2: Matrix) -> Result[Matrix]:
        rs1, rs2 = size(mat1)[0], size(mat2)[0]
        if rs1 != rs2:
            return fail(
                ErrorKind.SHAPE_MISMATCH,
                f"Matrices have different row dimensions ({rs1} and {rs2}). Must be same!",
                rows1=rs1,
                rows2=rs2,
            )
        return Ok([list(r1) + list(r2) for r1, r2 in zip(mat1, mat2)])

    return and_then2(check_matrix(matrix1), check_matrix(matrix2), join)


def concat_col(matrix1: Matrix, matrix2: Matrix) -> Result[Matrix]:
    """
    Вертикальное соединение. Число столбцов должно совпадать.

    Examples:
        >>> concat_col([[1, 2]], [[3, 4], [5, 6]])
        Ok(value=[[1, 2], [3, 4], [5, 6]])
    """

    def join(mat1: Matrix, mat2: Matrix) -> Result[Matrix]:
        cs1, cs2 = size(mat1)[1], size(mat2)[1]
        if cs1 != cs2:
            return fail(
                ErrorKind.SHAPE_MISMATCH,
                f"Matrices have different column dimensions ({cs1} and {cs2}). Must be same!",
                cols1=cs1,
                cols2=cs2,
            )
        return Ok([list(row) for row in mat1 + mat2])

    return and_then2(check_matrix(matrix1), check_matrix(matrix2), join)


def reshape(source: Union[List[Number], Matrix], row: int, col: int) -> Result[Union[List[Number], Matrix]]:
    """
    Изменение формы вектора или матрицы.

    Элементы берутся построчно и раскладываются в row строк по col
    элементов; row * col должно совпадать с числом элементов.
    Строка-вектор в форму (n, 1) — столбец, в форму (1, n) — сам вектор;
    матрица в форму (1, n) — строка-вектор.

    Examples:
        >>> reshape(list(range(1, 7)), 3, 2)
        Ok(value=[[1, 2], [3, 4], [5, 6]])
        >>> reshape([[1, 2, 3], [4, 5, 6]], 1, 6)
        Ok(value=[1, 2, 3, 4, 5, 6])
    """
    checked = check_positive_integer(None, row, "row number").and_then(
        lambda _: check_positive_integer(None, col, "column number")
    )
    if isinstance(checked, Err):
        return checked

    def chunk(values: List[Number]) -> Matrix:
        return [values[i:i + col] for i in range(0, len(values), col)]

    if ROW_VECTOR_CONTRACT.is_valid(source):
        reshapeable = check_reshapeable(list(source), len(source), row, col)
        if col == 1:
            return reshapeable.map(_vector.transpose)
        if row == 1:
            return reshapeable
        return reshapeable.map(chunk)

    def flatten(mat: Matrix) -> Result[List[Number]]:
        rs, cs = size(mat)
        return check_reshapeable([el for r in mat for el in r], rs * cs, row, col)

    flat = check_matrix(source).and_then(flatten)
    if row == 1:
        return flat
    return flat.map(chunk)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def _rowwise(
    matrix1: Matrix,
    matrix2: Matrix,
    op: Callable[[List[Number], List[Number]], Result[List[Number]]],
    what: str = "matrices",
) -> Result[Matrix]:
    """Построчное применение векторной операции к матрицам одного размера."""

    def apply(mat1: Matrix, mat2: Matrix) -> Result[Matrix]:
        return check_same_size(mat1, size(mat1), size(mat2), what).and_then(
            lambda _: collect(op(r1, r2) for r1, r2 in zip(mat1, mat2))
        )

    return and_then2(check_matrix(matrix1), check_matrix(matrix2), apply)


def add(matrix1: Matrix, matrix2: Matrix) -> Result[Matrix]:
    """
    Сумма двух матриц одного размера.

    Examples:
        >>> add([[1, 2, 3], [4, 5, 6], [7, 8, 9]], new(3, 1).unwrap())
        Ok(value=[[2, 3, 4], [5, 6, 7], [8, 9, 10]])
    """
    return _rowwise(matrix1, matrix2, _vector.add)


def sub(matrix1: Matrix, matrix2: Matrix) -> Result[Matrix]:
    """
    Разность двух матриц одного размера.

    Examples:
        >>> sub([[1, 2, 3], [4, 5, 6], [7, 8, 9]], new(3, 1).unwrap())
        Ok(value=[[0, 1, 2], [3, 4, 5], [6, 7, 8]])
    """
    return _rowwise(matrix1, matrix2, _vector.sub)


def schur_product(matrix1: Matrix, matrix2: Matrix) -> Result[Matrix]:
    """
    Произведение Адамара (Шура): поэлементное произведение матриц одного
    размера.

    Examples:
        >>> schur_product([[1, 2, 3], [5, 6, 7]], [[1, 2, 3], [4, 5, 6]])
        Ok(value=[[1, 4, 9], [20, 30, 42]])
    """
    return _rowwise(matrix1, matrix2, _vector.inner_product)


def product(matrix1: Matrix, matrix2: Matrix) -> Result[Matrix]:
    """
    Матричное произведение: (n×p) · (p×m) -> (n×m).

    Элемент (i, j) — скалярное произведение i-й строки первой матрицы и j-го
    столбца второй (строки транспонированной второй матрицы).

    Examples:
        >>> product([[1, 2], [3, 4]], [[1, 2], [3, 4]])
        Ok(value=[[7, 10], [15, 22]])
    """

    def multiply(mat1: Matrix, mat2: Matrix) -> Result[Matrix]:
        (rs1, cs1), (rs2, cs2) = size(mat1), size(mat2)
        if cs1 != rs2:
            return fail(
                ErrorKind.SHAPE_MISMATCH,
                f"Column size of first matrix ({rs1}, {cs1}) must be same as "
                f"row size of second matrix ({rs2}, {cs2})!",
                size1=(rs1, cs1),
                size2=(rs2, cs2),
            )
        columns = transpose(mat2)
        return collect(
            collect(_vector.dot(row1, col2) for col2 in columns) for row1 in mat1
        )

    return and_then2(check_matrix(matrix1), check_matrix(matrix2), multiply)


def mult_by_num(matrix: Matrix, val: Number) -> Matrix:
    """
    Умножение матрицы на число.

    Examples:
        >>> mult_by_num([[1, 2], [3, 4]], 2)
        [[2, 4], [6, 8]]
    """
    return [_vector.mult_by_num(row, val) for row in matrix]


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def is_close(matrix1: Matrix, matrix2: Matrix, tolerance: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
    """
    Приближённое равенство матриц одного размера (для float-элементов).

    Returns:
        False если размеры различаются или хотя бы одна пара элементов не близка
    """
    if check_matrix(matrix1).is_err() or check_matrix(matrix2).is_err():
        return False
    if size(matrix1) != size(matrix2):
        return False
    return all(
        _is_close_number(x, y, tolerance)
        for r1, r2 in zip(matrix1, matrix2)
        for x, y in zip(r1, r2)
    )
